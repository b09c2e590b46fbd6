class AthleteError(Exception):
    """Base class for errors raised by the Athlete API client."""


class ConfigurationError(AthleteError):
    """Missing or invalid credentials or profile configuration."""


class SigningEnvironmentError(AthleteError):
    """The keyed-hash primitive needed for signing is not available."""
