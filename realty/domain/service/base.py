"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the engine's logic that spans the catalog, the
    association store and the detail fetchers.
    """

    pass
