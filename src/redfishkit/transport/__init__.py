from __future__ import annotations

from .base import Client, Response
from .http import HTTPClient

__all__ = ["Client", "Response", "HTTPClient"]
