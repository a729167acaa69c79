"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span entities or need
    repositories, e.g. validating a reply against its parent chain.
    """

    pass
