"""Entity base capability shared by every Redfish resource.

Two classes live here:

- `Entity`        : identity (``@odata.id``, ``Id``, ``Name``), an attached
  transport, the raw bytes it was decoded from, and the typed constructors
  ``get()`` / ``list_referenced()`` that every resource type inherits.
- `MutableEntity` : adds the snapshot-diff ``update()`` for resources with
  server-writable properties. Each subclass declares its whitelist in
  ``read_write_fields``; the whitelist is checked when the class is defined.

Lifecycle
---------
1. ``X.get(client, uri)`` GETs and decodes the resource, keeping the raw
   response bytes as the snapshot.
2. Callers assign attributes on the live instance.
3. ``update()`` rebuilds the snapshot from the raw bytes, diffs the whitelisted
   fields and PATCHes only the delta. The snapshot is not refreshed
   afterwards; call ``refresh()`` for a new baseline.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from pydantic import Field, PrivateAttr, ValidationError

from redfishkit.transport.base import Client, Response

from .collection import list_referenced
from .diff import compute_patch, to_wire
from .errors import CollectionError, DecodeError, RedfishError
from .odata import RedfishModel
from .result import Result
from .settings import get_logger

logger = get_logger(__name__)


def encode(payload: dict[str, Any]) -> bytes:
    """Serialize a request body."""
    return json.dumps(payload).encode("utf-8")


@dataclass(frozen=True, slots=True)
class Action:
    """An action advertised in a resource's ``Actions`` object.

    Attributes
    ----------
    name : str
        Qualified action name, e.g. ``"#ComputerSystem.Reset"``.
    target : str
        URI to POST to.
    allowable : dict[str, list[str]]
        Parameter name to allowed values, from the
        ``<Param>@Redfish.AllowableValues`` annotations. Empty when the
        service does not advertise restrictions.
    """

    name: str
    target: str
    allowable: dict[str, list[str]] = field(default_factory=dict)


class Entity(RedfishModel):
    """Common identity and transport plumbing for every resource."""

    odata_id: str = Field(default="", alias="@odata.id")
    odata_type: str | None = Field(default=None, alias="@odata.type")
    odata_etag: str | None = Field(default=None, alias="@odata.etag")
    odata_context: str | None = Field(default=None, alias="@odata.context")
    id: str = ""
    name: str = ""
    description: str | None = None
    actions: dict[str, Any] | None = None
    oem: dict[str, Any] | None = None

    _client: Client | None = PrivateAttr(default=None)
    _raw: bytes | None = PrivateAttr(default=None)

    # ----- Construction ------------------------------------------------------
    @classmethod
    def from_json(cls, data: bytes, *, uri: str | None = None, client: Client | None = None) -> Self:
        """Decode ``data`` into an instance, keeping the bytes as its snapshot.

        Raises
        ------
        DecodeError
            If ``data`` is not JSON or does not match the resource schema.
        """
        try:
            resource = cls.model_validate_json(data)
        except ValidationError as exc:
            raise DecodeError(f"cannot decode {cls.__name__}: {exc}", uri=uri) from exc
        if not resource.odata_id and uri:
            resource.odata_id = uri
        resource._raw = bytes(data)
        resource._client = client
        return resource

    @classmethod
    def get(cls, client: Client, uri: str) -> Self:
        """Fetch and decode the resource at ``uri``."""
        response = client.get(uri)
        return cls.from_json(response.body, uri=uri, client=client)

    @classmethod
    def list_referenced(cls, client: Client, link: str | None) -> Result[list[Self], CollectionError]:
        """Fetch every member of the collection at ``link`` as this type."""
        return list_referenced(client, link, cls)

    # ----- Transport ---------------------------------------------------------
    @property
    def client(self) -> Client:
        """The transport this resource was fetched with."""
        if self._client is None:
            raise RedfishError(f"{type(self).__name__} {self.odata_id!r} has no client attached")
        return self._client

    def set_client(self, client: Client) -> None:
        self._client = client

    @property
    def raw(self) -> bytes | None:
        """The bytes this instance was decoded from, if any."""
        return self._raw

    def refresh(self) -> None:
        """Re-fetch the resource, replacing its values and its snapshot."""
        fresh = type(self).get(self.client, self.odata_id)
        for attr in type(self).model_fields:
            setattr(self, attr, getattr(fresh, attr))
        if self.model_extra is not None:
            self.model_extra.clear()
            self.model_extra.update(fresh.model_extra or {})
        self._raw = fresh._raw

    # ----- Actions -----------------------------------------------------------
    def action(self, name: str) -> Action:
        """Look up an advertised action by its qualified name.

        Raises
        ------
        RedfishError
            If the resource does not advertise the action.
        """
        entry = (self.actions or {}).get(name)
        if not isinstance(entry, dict) or not isinstance(entry.get("target"), str):
            raise RedfishError(f"{self.odata_id or type(self).__name__} does not support {name}")
        allowable = {
            key.split("@", 1)[0]: [str(v) for v in values]
            for key, values in entry.items()
            if key.endswith("@Redfish.AllowableValues") and isinstance(values, list)
        }
        return Action(name=name, target=entry["target"], allowable=allowable)

    def perform_action(self, name: str, **parameters: Any) -> Response:
        """POST an advertised action with ``parameters`` as its body.

        Parameter values are checked against the allowable values the service
        advertises, when it advertises any.

        Raises
        ------
        ValueError
            If a parameter value is not allowed by the service.
        """
        act = self.action(name)
        body = {key: to_wire(value) for key, value in parameters.items()}
        for key, value in body.items():
            allowed = act.allowable.get(key)
            if allowed and str(value) not in allowed:
                raise ValueError(f"{key}={value!r} is not allowed for {name}; expected one of {allowed}")
        logger.info("POST %s %s", act.target, body)
        return self.client.post(act.target, encode(body))


class MutableEntity(Entity):
    """A resource with server-writable properties.

    Subclasses must set ``read_write_fields`` to the (non-empty) ordered tuple
    of attribute names the service accepts in a PATCH.
    """

    read_write_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if not cls.read_write_fields:
            raise TypeError(f"{cls.__name__} must declare at least one read_write_fields entry")
        unknown = [name for name in cls.read_write_fields if name not in cls.model_fields]
        if unknown:
            raise TypeError(f"{cls.__name__}.read_write_fields names unknown fields: {unknown}")

    def snapshot(self) -> Self:
        """Decode a fresh copy of the state last received from the service.

        Raises
        ------
        DecodeError
            If no raw bytes were retained or they no longer decode.
        """
        if self._raw is None:
            raise DecodeError(
                f"{type(self).__name__} was not decoded from a service response; nothing to diff against",
                uri=self.odata_id or None,
            )
        return type(self).from_json(self._raw, uri=self.odata_id)

    def patch_payload(self) -> dict[str, Any]:
        """Return the PATCH body ``update()`` would send, without sending it."""
        return compute_patch(self.snapshot(), self, self.read_write_fields)

    def update(self) -> None:
        """Commit changed writable properties to the service.

        Issues no request at all when nothing whitelisted changed. Transport
        errors, including a service refusing a value with HTTP 400, propagate
        unchanged.
        """
        payload = self.patch_payload()
        if not payload:
            logger.debug("No writable changes on %s; skipping PATCH", self.odata_id)
            return
        logger.info("PATCH %s fields=%s", self.odata_id, sorted(payload))
        self.client.patch(self.odata_id, encode(payload))


__all__ = ["Action", "Entity", "MutableEntity", "encode"]
