"""Core package initializer for redfishkit.

The entity base, diff engine and collection fetcher live in submodules:
    from redfishkit.core.entity import Entity, MutableEntity
    from redfishkit.core.collection import list_referenced
"""

from __future__ import annotations

__all__ = ["__doc__"]
