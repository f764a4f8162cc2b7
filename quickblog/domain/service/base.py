"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Domain services hold logic that spans a repository call or does not
    belong to a single entity.
    """

    pass
