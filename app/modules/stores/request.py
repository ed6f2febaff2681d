"""Stores API request.

StoreAPIRequest analyzes the URL of one API call and tells the transport
layer whether the call is valid and which service it targets. Build one
instance per incoming request.

Usage:
    api_request = StoreAPIRequest(ParsedURL(path, query), catalog, api_versions)
    if not api_request.is_valid_request():
        payload, status_code = api_request.invalid_api_call()
    service = api_request.get_service()
"""

from typing import Dict, Optional, Tuple

from infrastructure.operations import OperationResult
from modules.stores.catalog import CatalogRegistry
from modules.stores.classifier import classify
from modules.stores.extractor import extract_path_parameters, extract_query_parameters
from modules.stores.models import APIVersions, ParsedURL, QueryType, StructuredQuery
from modules.stores.validator import RequestValidator

INVALID_REQUEST_STATUS = 400


class StoreAPIRequest:
    """Parsed and classified API call.

    Attributes:
        url: Parsed URL of the call.
        parameters: Path parameters, version stripped.
        query_parameters: Query string parameters.
        query: Structured query built from the path.
    """

    def __init__(
        self,
        url: ParsedURL,
        catalog: CatalogRegistry,
        api_versions: Optional[APIVersions] = None,
    ):
        self.url = url
        self.catalog = catalog
        self.api_versions = api_versions or APIVersions()

        self.parameters = extract_path_parameters(
            url.path or "", default_version=self.api_versions.default
        )
        self.query_parameters: Dict[str, str] = extract_query_parameters(url.query)
        self.query: StructuredQuery = classify(self.parameters, catalog)
        self._validator = RequestValidator(catalog, self.api_versions)

    @property
    def query_type(self) -> QueryType:
        return self.query.query_type

    def validate(self) -> OperationResult:
        """Run the validation pipeline for this request."""
        return self._validator.validate(self.parameters, self.query, self.url.path)

    def is_valid_request(self) -> bool:
        """Check if the API request is valid."""
        return self.validate().is_success

    def get_service(self) -> Optional[str]:
        """Return the requested service, or None if it is not a known service."""
        if self._validator.is_valid_service(self.parameters):
            return self.parameters.get(1)
        return None

    def invalid_api_call(
        self, result: Optional[OperationResult] = None
    ) -> Tuple[Dict[str, str], int]:
        """Return the error payload and HTTP status for an invalid call.

        Args:
            result: Verdict already computed by validate(), if any.
        """
        result = result or self.validate()
        return {"error": result.reason}, INVALID_REQUEST_STATUS

    def get_current_api_version(self) -> str:
        """Return the current API version, regardless of the requested one."""
        return self.api_versions.current
