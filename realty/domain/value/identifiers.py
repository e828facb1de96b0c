"""Strongly typed identifiers for realty domain entities.

Using NewType for strong typing prevents mixing up tenant, tag and entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

TenantId = NewType("TenantId", UUID)
TagId = NewType("TagId", UUID)
EntityId = NewType("EntityId", UUID)
