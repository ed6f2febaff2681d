"""Data models for Stores API requests.

Lightweight frozen dataclasses built once per request and read-only
afterwards:

  - ParsedURL: raw path and query string received by the transport layer
  - PathParameters: decoded path segments with the API version stripped
  - StructuredQuery: what the request asks for (service, product or store,
    channel, locale)
  - APIVersions: supported API versions and the current one
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class QueryType(str, Enum):
    """Scope of a request: a store or a product."""

    STORE = "store"
    PRODUCT = "product"


@dataclass(frozen=True)
class ParsedURL:
    """Path and query string of an incoming request."""

    path: str = ""
    query: Optional[str] = None


@dataclass(frozen=True)
class APIVersions:
    """Registry of API versions.

    Attributes:
        supported: Supported versions, oldest first.
        current: Version advertised as current.
    """

    supported: Tuple[str, ...] = ("v1",)
    current: str = "v1"

    @property
    def default(self) -> str:
        """Version assumed for legacy calls without a version segment."""
        return self.supported[0]

    def is_supported(self, version: str) -> bool:
        return version in self.supported


@dataclass(frozen=True)
class PathParameters:
    """Decoded path segments of an API call.

    Segment positions carry meaning: 0 is the product or store, 1 the
    service, 2 the channel and 3 the locale.

    Attributes:
        segments: Decoded and trimmed segments, without "api" and the version.
        api_version: Version found in the path, or the default version.
        is_legacy: True when the path did not contain a version.
    """

    segments: Tuple[str, ...] = ()
    api_version: str = "v1"
    is_legacy: bool = False

    @property
    def count(self) -> int:
        return len(self.segments)

    def get(self, index: int) -> Optional[str]:
        """Return the segment at index, or None if absent."""
        if 0 <= index < len(self.segments):
            return self.segments[index]
        return None


@dataclass(frozen=True)
class StructuredQuery:
    """Structured view of an API request.

    Only one of product and store is meaningful, depending on query_type;
    for store queries product is empty. For product queries store is the
    product's home store.
    """

    query_type: QueryType = QueryType.PRODUCT
    service: Optional[str] = None
    product: str = ""
    store: str = ""
    channel: Optional[str] = None
    locale: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the fields set by the request."""
        data: Dict[str, Any] = {}
        if self.service is not None:
            data["service"] = self.service
        data["product"] = self.product
        data["store"] = self.store
        if self.channel is not None:
            data["channel"] = self.channel
        if self.locale is not None:
            data["locale"] = self.locale
        return data
