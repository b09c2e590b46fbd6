"""Request signing client for the Athlete.com API."""

__version__ = '0.1.0'
