"""redfishkit: typed client binding for the Redfish systems-management API.

Resource types live in :mod:`redfishkit.schema`; the entity base, snapshot
diff and resilient collection fetch live in :mod:`redfishkit.core`.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
