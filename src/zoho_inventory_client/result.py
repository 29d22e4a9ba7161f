from dataclasses import dataclass
from typing import Any, Dict, Union

from .exceptions import RemoteError, TransportError


@dataclass(frozen=True)
class Success:
    """Successful call. ``payload`` is the decoded envelope, unmodified."""

    payload: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Dict[str, Any]:
        return self.payload


@dataclass(frozen=True)
class Failure:
    """
    Failed call carrying either a ``TransportError`` or a ``RemoteError``.

    ``refresh_attempted`` is True when a token refresh was tried during
    the call; the carried error is still the original one.
    """

    error: Union[TransportError, RemoteError]
    refresh_attempted: bool = False

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_transport_error(self) -> bool:
        return isinstance(self.error, TransportError)

    @property
    def is_remote_error(self) -> bool:
        return isinstance(self.error, RemoteError)

    def unwrap(self) -> Dict[str, Any]:
        raise self.error


Result = Union[Success, Failure]
