"""Transport collaborator contract consumed by the entity base and the fetcher.

The core never talks HTTP directly. It needs exactly three verbs:

- ``get(uri)``          -> :class:`Response`
- ``patch(uri, body)``  -> :class:`Response`  (partial update)
- ``post(uri, body)``   -> :class:`Response`  (actions such as Reset)

A transport raises :class:`~redfishkit.core.errors.TransportError` for any
request that does not complete with a 2xx status, so a returned
:class:`Response` is always a successful one. Authentication, TLS and retry
policy live entirely behind this protocol.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Response:
    """A completed HTTP exchange with its body fully read into memory.

    Attributes
    ----------
    status : int
        HTTP status code (2xx for responses handed back by a transport).
    body : bytes
        Raw response body; empty for ``204 No Content``.
    headers : Mapping[str, str]
        Response headers as received.
    """

    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return True for 2xx statuses."""
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON, or return ``None`` for an empty body."""
        if not self.body:
            return None
        return json.loads(self.body.decode("utf-8"))


@runtime_checkable
class Client(Protocol):
    """Minimal blocking transport used by every resource type."""

    def get(self, uri: str) -> Response: ...

    def patch(self, uri: str, body: bytes) -> Response: ...

    def post(self, uri: str, body: bytes) -> Response: ...


__all__ = ["Client", "Response"]
