"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services own state or behaviour that spans several aggregates,
    such as the address book together with its history and display filter.
    """

    pass
