"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several records, such as
    applying a vote to a post, its author and the voter.
    """

    pass
