"""Snapshot diff: turn (original, current, whitelist) into a minimal PATCH body.

Only attributes named in the whitelist are ever read. For each of them the
value on the snapshot is compared to the live value with ``==`` (scalars by
value, lists element-wise, embedded models field by field). Changed fields
are emitted under their wire name with a JSON-ready value; unchanged fields
are left out entirely.

When both sides of a changed field are embedded models of the same type, the
emitted value is itself a delta (only the nested properties that were set and
changed), so changing ``Boot.BootSourceOverrideTarget`` does not resend the
rest of ``Boot``.

No shipped whitelist names an embedded object yet (``ComputerSystem`` writes
``Boot`` through ``set_boot``), so the nested delta is kept for complex
writable properties added to a whitelist later; ``tests/test_diff.py``
exercises it directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_jsonable_python


def wire_name(model: type[BaseModel], attr: str) -> str:
    """Return the JSON property name used on the wire for ``attr``."""
    info = model.model_fields[attr]
    return info.serialization_alias or info.alias or attr


def to_wire(value: Any) -> Any:
    """Convert a field value into its JSON-ready form.

    Embedded models only carry the properties that were actually set, so a
    freshly built ``Boot(boot_source_override_target=...)`` does not send a
    null for every other property.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, list | tuple):
        return [to_wire(v) for v in value]
    return to_jsonable_python(value, by_alias=True)


def compute_patch(
    original: BaseModel,
    current: BaseModel,
    fields: Iterable[str],
) -> dict[str, Any]:
    """Return the partial document describing how ``current`` differs from ``original``.

    Parameters
    ----------
    original:
        The snapshot decoded from the last-fetched bytes. Never modified.
    current:
        The live, possibly mutated instance.
    fields:
        Attribute names that may be sent. Anything else is ignored, even if
        it changed.

    Returns
    -------
    dict[str, Any]
        Wire name to new value for every changed whitelisted field; empty when
        nothing changed.
    """
    model = type(current)
    payload: dict[str, Any] = {}
    for attr in fields:
        before = getattr(original, attr, None)
        after = getattr(current, attr, None)
        if before == after:
            continue
        if _same_model_type(before, after):
            # Properties never set on the new value are left alone on the service.
            declared = type(after).model_fields
            nested = compute_patch(
                before, after, [name for name in declared if name in after.model_fields_set]
            )
            # Only extras (annotations, OEM) differed: nothing writable changed.
            if not nested:
                continue
            payload[wire_name(model, attr)] = nested
        else:
            payload[wire_name(model, attr)] = to_wire(after)
    return payload


def _same_model_type(before: Any, after: Any) -> bool:
    return (
        isinstance(before, BaseModel)
        and isinstance(after, BaseModel)
        and type(before) is type(after)
    )


__all__ = ["compute_patch", "to_wire", "wire_name"]
