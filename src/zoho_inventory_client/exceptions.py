from typing import Optional


class ZohoInventoryError(Exception):
    """Base class for every error raised by the Zoho Inventory client."""


class ConfigurationError(ZohoInventoryError):
    """
    Raised when the client configuration is missing a required field or
    holds an invalid value.

    Attributes
    ----------
    field : str or None
        Name of the offending configuration field, when known.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.field = field


class TransportError(ZohoInventoryError):
    """
    Network or transport-level failure (connection refused, DNS failure,
    timeout, unreadable response body).

    Transport errors are never retried by the client.

    Attributes
    ----------
    code : str
        Short machine-readable identifier of the failure, e.g. the name
        of the underlying ``requests`` exception.
    description : str
        Human-readable description.
    """

    def __init__(
        self,
        code: str,
        description: str
    ) -> None:
        super().__init__(f"Transport error ({code}): {description}")
        self.code = code
        self.description = description

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.code == other.code
            and self.description == other.description
        )

    def __hash__(self):
        return hash((type(self), self.code, self.description))


class ResponseParseError(TransportError):
    """The response body could not be read as a Zoho JSON envelope."""

    def __init__(self, description: str) -> None:
        super().__init__("malformed_response", description)


class RemoteError(ZohoInventoryError):
    """
    Error envelope returned by the Zoho Inventory API (``code`` != 0).

    Attributes
    ----------
    code : int
        Numeric Zoho error code.
    message : str
        Message reported by Zoho, unmodified.
    """

    def __init__(
        self,
        code: int,
        message: str
    ) -> None:
        super().__init__(f"Zoho error ({code}): {message}")
        self.code = code
        self.message = message

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.code == other.code
            and self.message == other.message
        )

    def __hash__(self):
        return hash((type(self), self.code, self.message))
