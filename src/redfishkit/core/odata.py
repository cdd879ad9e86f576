"""Base model and OData envelope types shared by every schema file.

This module defines the Pydantic v2 building blocks that all resource and
sub-object contracts embed:

- `RedfishModel`      : base config. Python attributes are snake_case, wire
  names are PascalCase (generated, or given explicitly when Redfish breaks
  the pattern, e.g. ``UUID`` or ``EnergykWh``). Unknown and OEM properties are
  kept as extras so nothing the service sent is dropped.
- `ODataLink`         : the ``{"@odata.id": "<uri>"}`` reference object.
- `ResourceCollection`: a collection document (ordered ``Members`` links).
- `RedfishEnum`       : base for enumerations. Values the service sends that
  are not listed (newer schema versions, vendor values) decode to a
  pseudo-member instead of failing the whole resource.

Notes
-----
- ``validate_assignment`` is on: assigning ``"On"`` to an enum-typed field
  stores the enum member, so diffs compare like with like.
- ``Members@odata.count`` is advisory only; iteration always follows
  ``Members``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class RedfishModel(BaseModel):
    """Base for every Redfish object, top-level resource or embedded."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
        validate_assignment=True,
    )


class RedfishEnum(str, Enum):
    """A string enumeration that tolerates values it does not list.

    Listed values resolve to their members. Any other string becomes a
    pseudo-member carrying that string as both name and value, so it compares
    equal to an identical string and serializes back unchanged.
    """

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = value
        member._value_ = value
        return member


class ODataLink(RedfishModel):
    """Reference to another resource by URI."""

    odata_id: str = Field(alias="@odata.id")


def link_uri(link: ODataLink | None) -> str:
    """Return the URI of ``link``, or ``""`` for a missing link."""
    return link.odata_id if link is not None else ""


class ResourceCollection(RedfishModel):
    """A Redfish collection document."""

    odata_id: str = Field(default="", alias="@odata.id")
    odata_type: str | None = Field(default=None, alias="@odata.type")
    name: str | None = None
    members: list[ODataLink] = Field(default_factory=list)
    members_count: int | None = Field(default=None, alias="Members@odata.count")
    next_link: str | None = Field(default=None, alias="Members@odata.nextLink")

    def member_links(self) -> list[str]:
        """Return the member URIs in document order."""
        return [m.odata_id for m in self.members]


__all__ = ["RedfishModel", "RedfishEnum", "ODataLink", "ResourceCollection", "link_uri"]
