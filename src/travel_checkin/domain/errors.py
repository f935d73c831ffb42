"""Domain error taxonomy."""


class TravelCheckinError(Exception):
    """Base class for all travel check-in errors."""


class InvalidInputError(TravelCheckinError, ValueError):
    """A required field is missing or malformed; raised before any side effect."""


class RegistrationRequiredError(InvalidInputError):
    """The operation needs a completed registration."""


class NotFoundError(TravelCheckinError):
    """A geocoding query matched nothing."""


class UpstreamFailureError(TravelCheckinError):
    """An external service failed or returned data that could not be parsed."""


class GeocodeError(UpstreamFailureError):
    """Transport or parsing failure while geocoding."""


class GeolocationError(UpstreamFailureError):
    """The device position could not be obtained."""


class CorruptStateError(TravelCheckinError):
    """Persisted data failed validation."""
