"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the forum's business rules: how creates resolve
    against existing rows, how posts nest, how a thread is traversed.
    """

    pass
