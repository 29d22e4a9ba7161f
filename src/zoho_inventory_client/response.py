from dataclasses import dataclass
from typing import Union
import json

from .exceptions import RemoteError, ResponseParseError
from .result import Success


AUTH_EXPIRED_CODE = 14
AUTH_EXPIRED_MESSAGE = "Invalid value passed for authtoken."


@dataclass(frozen=True)
class AuthExpired:
    code: int
    message: str

    def to_error(self) -> RemoteError:
        return RemoteError(self.code, self.message)


Classification = Union[Success, AuthExpired, RemoteError]


def interpret(body: Union[str, bytes]) -> Classification:
    """
    Classify a raw Zoho response body.

    Returns
    -------
    Success
        When ``code`` is 0; the payload is the whole decoded envelope.
    AuthExpired
        When ``code`` is 14 and ``message`` is exactly
        ``"Invalid value passed for authtoken."``.
    RemoteError
        For any other nonzero code. Returned, not raised.

    Raises
    ------
    ResponseParseError
        If the body is not a JSON object with an integer ``code``.
    """
    try:
        envelope = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ResponseParseError(f"Response is not valid JSON: {e}")

    if not isinstance(envelope, dict):
        raise ResponseParseError("Response is not a JSON object.")

    code = envelope.get("code")
    # bool is an int subclass but never a valid code
    if not isinstance(code, int) or isinstance(code, bool):
        raise ResponseParseError("Response has no integer 'code' field.")

    if code == 0:
        return Success(envelope)

    message = envelope.get("message", "")
    if code == AUTH_EXPIRED_CODE and message == AUTH_EXPIRED_MESSAGE:
        return AuthExpired(code, message)

    return RemoteError(code, message)
