# -----------------------------------------------------------------------------
# Blocking HTTP transport for a Redfish service.
#
# This module provides the concrete `Client` used outside of tests:
#   - reads endpoint / credentials / TLS / timeout from `Settings`
#   - joins service-relative URIs ("/redfish/v1/Systems") onto the endpoint
#   - sends the headers every Redfish service expects (OData-Version, JSON)
#   - turns every non-2xx answer into a `TransportError` carrying the
#     service's own error message
#
# The implementation uses only the Python standard library (`urllib.request`).
# Every request funnels through `_request()`, which unit tests monkeypatch so
# that no real HTTP calls are made during CI.
#
# Session login (X-Auth-Token) and retry policy are not handled here; basic
# auth is sent on each request when credentials are configured.
# -----------------------------------------------------------------------------
from __future__ import annotations

import base64
import http.client
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urljoin

from redfishkit.core.errors import TransportError
from redfishkit.core.settings import Settings, get_logger, load_settings

from .base import Response

logger = get_logger(__name__)

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "OData-Version": "4.0",
}


@dataclass(slots=True)
class HTTPClient:
    """Synchronous Redfish transport implementing the `Client` protocol.

    Parameters
    ----------
    endpoint:
        Base URL of the service, e.g. ``"https://10.0.0.5"``. Service URIs
        such as ``"/redfish/v1/Systems/1"`` are resolved against it.
    username, password:
        Optional basic-auth credentials. Both must be set for the
        ``Authorization`` header to be sent.
    insecure:
        Disable TLS certificate and hostname verification. BMCs very often
        ship self-signed certificates.
    timeout_seconds:
        Network timeout applied to every request.
    """

    endpoint: str
    username: str | None = None
    password: str | None = None
    insecure: bool = False
    timeout_seconds: float = 30.0

    # --------------------------------------------------------------------- #
    # Constructors
    # --------------------------------------------------------------------- #
    @classmethod
    def from_settings(cls, config: Settings | None = None) -> HTTPClient:
        """Construct a client from `Settings` (env vars and `.env` files)."""
        config = config or load_settings()
        return cls(
            endpoint=config.endpoint,
            username=config.username,
            password=config.password,
            insecure=config.insecure,
            timeout_seconds=config.timeout_seconds,
        )

    # --------------------------------------------------------------------- #
    # Client protocol
    # --------------------------------------------------------------------- #
    def get(self, uri: str) -> Response:
        """Issue a GET for ``uri``."""
        return self._send("GET", uri)

    def patch(self, uri: str, body: bytes) -> Response:
        """Issue a PATCH for ``uri`` with a JSON ``body``."""
        return self._send("PATCH", uri, body)

    def post(self, uri: str, body: bytes) -> Response:
        """Issue a POST for ``uri`` with a JSON ``body``."""
        return self._send("POST", uri, body)

    # --------------------------------------------------------------------- #
    # Internal helpers
    # --------------------------------------------------------------------- #
    def url_for(self, uri: str) -> str:
        """Resolve a service URI against :attr:`endpoint`.

        Absolute URLs are returned unchanged.
        """
        if uri.startswith(("http://", "https://")):
            return uri
        return urljoin(self.endpoint.rstrip("/") + "/", uri)

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.username and self.password:
            token = base64.b64encode(f"{self.username}:{self.password}".encode()).decode("ascii")
            headers["Authorization"] = f"Basic {token}"
        return headers

    def _send(self, method: str, uri: str, body: bytes | None = None) -> Response:
        url = self.url_for(uri)
        logger.debug("%s %s", method, url)
        response = self._request(
            method=method,
            url=url,
            headers=self._headers(body is not None),
            body=body,
        )
        if not response.ok:
            raise TransportError.from_body(
                uri=uri,
                status=response.status,
                reason=f"unexpected status {response.status}",
                body=response.body,
            )
        return response

    def _ssl_context(self) -> ssl.SSLContext | None:
        if not self.url_for("").startswith("https://"):
            return None
        context = ssl.create_default_context()
        if self.insecure:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def _request(
        self,
        *,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None,
    ) -> Response:
        """Perform one HTTP request and return the fully-read response.

        This method is the single seam for unit tests: they patch it on the
        class to return canned :class:`Response` objects.

        Raises
        ------
        TransportError
            On HTTP error statuses (with the Redfish error message parsed from
            the body) and on network failures (``status=None``), including a
            connection dropped or reset while the response is being read.
        """
        request = urllib.request.Request(
            url=url,
            data=body,
            headers=dict(headers),
            method=method,
        )

        try:
            with urllib.request.urlopen(
                request, timeout=self.timeout_seconds, context=self._ssl_context()
            ) as resp:
                return Response(
                    status=resp.status,
                    body=resp.read(),
                    headers=dict(resp.headers.items()),
                )
        except urllib.error.HTTPError as exc:
            raise TransportError.from_body(
                uri=url, status=exc.code, reason=str(exc.reason), body=exc.read()
            ) from exc
        except urllib.error.URLError as exc:
            raise TransportError(str(exc.reason), uri=url) from exc
        except TimeoutError as exc:
            raise TransportError("request timed out", uri=url) from exc
        except (http.client.HTTPException, OSError) as exc:
            # Dropped connections and truncated bodies surface outside URLError.
            raise TransportError(str(exc) or type(exc).__name__, uri=url) from exc


__all__ = ["HTTPClient", "DEFAULT_HEADERS"]
