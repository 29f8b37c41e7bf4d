"""Per-request failures. Every one of them becomes a 500 with an error envelope."""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for anything that stops a translation request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BodyReadError(TranslationError):
    """The request body could not be read to completion."""


class BodyCloseError(TranslationError):
    """The request body stream failed to close."""


class DecodeError(TranslationError):
    """The body is not a JSON array of strings."""


class EncodeError(TranslationError):
    """The result mapping could not be serialized."""


class PayloadTooLargeError(TranslationError):
    """The body or the identifier list exceeds a configured limit."""
