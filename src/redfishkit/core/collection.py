"""Resilient collection fetch.

Milestone flow
--------------
1. ``get_collection(client, link)`` fetches the collection document (following
   ``Members@odata.nextLink`` pages) and returns the ordered member URIs. Any
   transport or decode failure here is fatal and raised immediately.
2. ``list_referenced(client, link, model)`` fetches every member exactly once,
   in document order. A failing member is recorded under its URI and the loop
   moves on; it never aborts the remaining members.

The outcome is a :class:`~redfishkit.core.result.Result`:

- ``Ok(items)`` when every member was fetched,
- ``Err(CollectionError)`` otherwise, with ``error.items`` holding the members
  that did succeed and ``error.failures`` the URI -> exception map.

No retries happen here; each member is attempted once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import ValidationError

from .errors import CollectionError, DecodeError, RedfishError
from .odata import ResourceCollection
from .result import Result, err, ok
from .settings import get_logger

if TYPE_CHECKING:
    from redfishkit.transport.base import Client

    from .entity import Entity

T = TypeVar("T", bound="Entity")

logger = get_logger(__name__)


def get_collection(client: Client, link: str) -> list[str]:
    """Fetch the collection document at ``link`` and return its member URIs.

    Raises
    ------
    TransportError
        If any page of the collection cannot be fetched.
    DecodeError
        If any page is not a valid collection document.
    """
    links: list[str] = []
    page: str | None = link
    seen: set[str] = set()
    while page and page not in seen:
        seen.add(page)
        response = client.get(page)
        try:
            collection = ResourceCollection.model_validate_json(response.body)
        except ValidationError as exc:
            raise DecodeError(f"invalid collection document: {exc}", uri=page) from exc
        links.extend(collection.member_links())
        page = collection.next_link
    return links


def list_referenced(
    client: Client,
    link: str | None,
    model: type[T],
) -> Result[list[T], CollectionError]:
    """Fetch every member of the collection at ``link`` as ``model`` instances.

    An empty or missing ``link`` yields ``Ok([])`` without any request: many
    parent resources simply do not expose a given collection. Duplicate
    member links are collapsed, keeping the first occurrence.

    Parameters
    ----------
    client:
        Transport used for the collection document and every member.
    link:
        URI of the collection document.
    model:
        Resource type each member decodes into.

    Returns
    -------
    Result[list[T], CollectionError]
        ``Ok`` with all members, or ``Err`` carrying both the fetched members
        and the per-URI failures.
    """
    if not link:
        return ok([])

    member_links = list(dict.fromkeys(get_collection(client, link)))

    items: list[T] = []
    failures: dict[str, Exception] = {}
    for uri in member_links:
        try:
            items.append(model.get(client, uri))
        except RedfishError as exc:
            logger.warning("Failed to fetch %s member %s: %s", model.__name__, uri, exc)
            failures[uri] = exc

    if not failures:
        return ok(items)
    return err(CollectionError(link, items, failures))


def successes(result: Result[list[T], CollectionError]) -> list[T]:
    """Return the fetched members whether or not some of them failed."""
    if result.is_ok():
        return result.unwrap()
    return list(result.unwrap_err().items)


__all__ = ["get_collection", "list_referenced", "successes"]
