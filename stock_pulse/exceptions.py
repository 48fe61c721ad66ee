"""
Exception classes for Global Stock Pulse.

- ConfigurationError: the Gemini credential is missing (fatal for the session)
- GatewayFailure: transport error or empty reply from Gemini
- NormalizationFailure: a reply arrived but is not the expected JSON shape
"""


class StockPulseError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str = "An application error occurred"):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(StockPulseError):
    """
    Raised when the Gemini API key cannot be resolved.

    Detected before any request is attempted. The dashboard shows a blocking
    screen until the key is configured.
    """

    pass


class GatewayFailure(StockPulseError):
    """Raised when the Gemini call fails or returns no text."""

    pass


class NormalizationFailure(StockPulseError):
    """Raised when a reply cannot be parsed or validated into a result model."""

    pass
