"""Base class for domain services."""


class Service:
    """Marker base for desk domain services.

    Services get their repositories and ports through the constructor and
    keep no state between calls, so one instance can serve a whole request.
    """

    pass
