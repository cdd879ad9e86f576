"""Exception hierarchy shared by the transport, the entity base and the fetcher.

Taxonomy
--------
- :class:`TransportError`  : network or HTTP-level failure (including a 400
  returned by a service that refuses a PATCH value). Always propagated.
- :class:`DecodeError`     : malformed or schema-mismatched JSON for one
  resource, or a snapshot that cannot be rebuilt from its raw bytes.
- :class:`CollectionError` : the partial-failure report of a collection
  fetch. It travels *alongside* the successful members, never instead of them.

All three derive from :class:`RedfishError` so callers can catch the family
with a single ``except`` clause.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any


class RedfishError(Exception):
    """Base class for every error raised by redfishkit."""


class TransportError(RedfishError):
    """A request did not complete with a 2xx status.

    Attributes
    ----------
    uri : str
        The URI the request was issued against.
    status : int | None
        HTTP status code, or ``None`` when no response was received
        (connection refused, timeout, TLS failure).
    message : str
        Human-readable reason. For Redfish error bodies this is the service's
        own ``error.message``.
    extended_info : list[dict[str, Any]]
        ``@Message.ExtendedInfo`` entries from the error body, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        uri: str,
        status: int | None = None,
        extended_info: Sequence[Mapping[str, Any]] | None = None,
    ) -> None:
        self.uri = uri
        self.status = status
        self.message = message
        self.extended_info: list[dict[str, Any]] = [dict(e) for e in extended_info or ()]
        prefix = f"HTTP {status}" if status is not None else "network error"
        super().__init__(f"{prefix} for {uri}: {message}")

    @classmethod
    def from_body(cls, *, uri: str, status: int, reason: str, body: bytes) -> TransportError:
        """Build an error from a non-2xx response, parsing a Redfish error body.

        Redfish services answer failures with::

            {"error": {"code": "...", "message": "...",
                       "@Message.ExtendedInfo": [{"MessageId": "...", "Message": "..."}]}}

        Anything that does not match this shape falls back to ``reason``.
        """
        message = reason
        extended: list[dict[str, Any]] = []
        try:
            payload = json.loads(body.decode("utf-8")) if body else None
        except (UnicodeDecodeError, json.JSONDecodeError):
            payload = None

        if isinstance(payload, Mapping) and isinstance(payload.get("error"), Mapping):
            error = payload["error"]
            if isinstance(error.get("message"), str) and error["message"]:
                message = error["message"]
            info = error.get("@Message.ExtendedInfo")
            if isinstance(info, list):
                extended = [e for e in info if isinstance(e, Mapping)]
            # The first extended message is usually more specific than the summary.
            if extended and isinstance(extended[0].get("Message"), str):
                message = f"{message} ({extended[0]['Message']})"

        return cls(message, uri=uri, status=status, extended_info=extended)


class DecodeError(RedfishError):
    """A JSON document could not be decoded into the requested resource type."""

    def __init__(self, message: str, *, uri: str | None = None) -> None:
        self.uri = uri
        self.message = message
        super().__init__(f"{uri}: {message}" if uri else message)


class CollectionError(RedfishError):
    """Partial-failure report of a collection fetch.

    ``items`` holds every member that was fetched and decoded successfully, in
    the order of the collection document; ``failures`` maps each failing member
    URI to the error it raised. The two always add up to the number of distinct
    member links in the collection.
    """

    def __init__(
        self,
        link: str,
        items: Sequence[Any],
        failures: Mapping[str, Exception],
    ) -> None:
        self.link = link
        self.items: list[Any] = list(items)
        self.failures: dict[str, Exception] = dict(failures)
        super().__init__(
            f"{len(self.failures)} of {len(self.items) + len(self.failures)} members of "
            f"{link} failed: {', '.join(self.failures)}"
        )

    def empty(self) -> bool:
        """Return ``True`` when no member failed."""
        return not self.failures


__all__ = ["RedfishError", "TransportError", "DecodeError", "CollectionError"]
