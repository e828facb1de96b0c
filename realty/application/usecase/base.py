"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One read path of the engine: a validated request in, a response out.

    Use cases translate transport-neutral requests into domain service calls
    and shape the results; they hold no ranking logic of their own.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
