"""Stores API - request parsing, validation and services.

Main components:
- extractor: path and query string parameters
- classifier: StructuredQuery from path parameters
- validator: RequestValidator pipeline
- request: StoreAPIRequest, the per-request facade used by the HTTP layer
- catalog: CatalogRegistry protocol and YAMLCatalog
- services: StoreServices dispatcher
"""

from modules.stores.catalog import CatalogError, CatalogRegistry, YAMLCatalog
from modules.stores.models import (
    APIVersions,
    ParsedURL,
    PathParameters,
    QueryType,
    StructuredQuery,
)
from modules.stores.request import INVALID_REQUEST_STATUS, StoreAPIRequest
from modules.stores.services import StoreServices
from modules.stores.validator import SERVICES, RequestValidator

__all__ = [
    "APIVersions",
    "CatalogError",
    "CatalogRegistry",
    "INVALID_REQUEST_STATUS",
    "ParsedURL",
    "PathParameters",
    "QueryType",
    "RequestValidator",
    "SERVICES",
    "StoreAPIRequest",
    "StoreServices",
    "StructuredQuery",
    "YAMLCatalog",
]
