"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the booking rules that span events, bookings,
    invitations and the external calendar.
    """

    pass
