"""Failure kinds of the recommendation and advice paths."""


class StylistError(RuntimeError):
    """Base for every recoverable AI-path failure."""


class CredentialMissing(StylistError):
    """No Gemini API key is configured."""


class UpstreamError(StylistError):
    """Transport, auth or quota failure from the Gemini API."""


class ParseFailure(StylistError):
    """The model reply did not hold the expected JSON payload."""


class EmptyResult(ParseFailure):
    """The payload was well-formed but listed no recommendations."""
