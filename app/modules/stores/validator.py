"""Validation pipeline for Stores API requests.

Checks run in order and stop at the first failure:

1. a service was requested at all
2. enough parameters for minimal routing
3. the API version is supported
4. the product (product queries) or the store (store queries) is supported
5. the service exists
6. the call is technically valid for that service

The outcome is an OperationResult: success carrying the StructuredQuery, or
a permanent error carrying the reason shown to the API client.
"""

from typing import Callable, Dict, Optional

from core.logging import get_module_logger
from infrastructure.operations import ErrorCode, OperationResult
from modules.stores.catalog import CatalogRegistry
from modules.stores.models import (
    APIVersions,
    PathParameters,
    QueryType,
    StructuredQuery,
)

logger = get_module_logger()

SERVICES = (
    "done",
    "firefoxlocales",  # Legacy
    "listing",
    "localesmapping",
    "supportedlocales",
    "storelocales",
    "translation",
    "whatsnew",
)

NOT_ENOUGH_PARAMETERS = "Not enough parameters for this query."

Check = Callable[[PathParameters, StructuredQuery], Optional[OperationResult]]


class RequestValidator:
    """Decides if a request is valid against the catalog and API versions.

    Instances hold no per-request state and can validate any number of
    requests.
    """

    def __init__(self, catalog: CatalogRegistry, api_versions: APIVersions):
        self.catalog = catalog
        self.api_versions = api_versions
        self._service_checks: Dict[str, Check] = {
            "firefoxlocales": self._check_legacy_firefox_locales,
            "supportedlocales": self._check_supported_locales,
            "localesmapping": self._check_locales_mapping,
            "translation": self._check_translation,
            "storelocales": self._check_store_locales,
            "done": self._check_channel_service,
            "listing": self._check_channel_service,
            "whatsnew": self._check_whatsnew,
        }

    def validate(
        self, parameters: PathParameters, query: StructuredQuery, path: str = ""
    ) -> OperationResult:
        """Run the validation pipeline.

        Args:
            parameters: Extracted path parameters.
            query: Query built by the classifier.
            path: Original URL path, for logging.

        Returns:
            OperationResult.success(data=query) if valid, otherwise a
            permanent error with the first failure reason.
        """
        checks = (
            self._check_service_requested,
            self._check_routing_parameters,
            self._check_api_version,
            self._check_scope,
            self._check_service,
            self._check_service_call,
        )
        for check in checks:
            failure = check(parameters, query)
            if failure is not None:
                logger.warning(
                    "invalid_api_request",
                    reason=failure.message,
                    error_code=failure.error_code,
                    path=path,
                )
                return failure

        return OperationResult.success(data=query)

    def is_valid_service(self, parameters: PathParameters) -> bool:
        """True if the path names a known service."""
        return self._check_service(parameters, StructuredQuery()) is None

    # Pipeline steps

    def _check_service_requested(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        if not parameters.count:
            return OperationResult.permanent_error(
                "No service requested", error_code=ErrorCode.NO_SERVICE
            )
        return None

    def _check_routing_parameters(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        return self._require_parameters(parameters, 1)

    def _check_api_version(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        if not self.api_versions.is_supported(parameters.api_version):
            return OperationResult.permanent_error(
                f"Unsupported API version: {parameters.api_version}",
                error_code=ErrorCode.UNSUPPORTED_API_VERSION,
            )
        return None

    def _check_scope(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        if query.query_type == QueryType.PRODUCT:
            if query.product not in self.catalog.get_supported_products():
                return OperationResult.permanent_error(
                    f"Product ({parameters.get(0)}) is invalid.",
                    error_code=ErrorCode.INVALID_PRODUCT,
                )
        elif query.store not in self.catalog.get_supported_stores():
            return OperationResult.permanent_error(
                f"Store ({parameters.get(0)}) is invalid.",
                error_code=ErrorCode.INVALID_STORE,
            )
        return None

    def _check_service(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        failure = self._require_parameters(parameters, 2)
        if failure is not None:
            return failure

        service = parameters.get(1)
        if service not in SERVICES:
            return OperationResult.permanent_error(
                f"The service requested ({service}) doesn't exist",
                error_code=ErrorCode.INVALID_SERVICE,
            )
        return None

    def _check_service_call(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        check = self._service_checks.get(query.service or "")
        if check is None:
            return OperationResult.permanent_error(
                f"The service requested ({query.service}) doesn't exist",
                error_code=ErrorCode.INVALID_SERVICE,
            )
        return check(parameters, query)

    # Per-service checks

    def _check_legacy_firefox_locales(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        # TODO: remove the firefoxlocales service once the legacy log shows no traffic
        logger.warning(
            "legacy_service_requested",
            service="firefoxlocales",
            replacement="supportedlocales",
        )
        return self._check_supported_locales(parameters, query)

    def _check_supported_locales(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        # {product}/supportedlocales/{channel}
        return self._require_parameters(parameters, 3) or self._require_channel(query)

    def _check_locales_mapping(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        # {store}/localesmapping
        return self._require_parameters(parameters, 2)

    def _check_translation(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        # {product}/translation/{channel}/{locale}
        failure = self._require_parameters(parameters, 4) or self._require_channel(
            query
        )
        if failure is not None:
            return failure

        supported_locales = self.catalog.get_store_mozilla_common_locales(
            query.product, query.channel or ""
        )
        if query.locale not in supported_locales:
            return OperationResult.permanent_error(
                f"'{query.locale}' is not a supported locale for "
                f"{query.product}/{query.channel}.",
                error_code=ErrorCode.INVALID_LOCALE,
            )
        return None

    def _check_store_locales(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        # {store}/storelocales, nothing else to check
        return None

    def _check_channel_service(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        # {product}/done/{channel}, {product}/listing/{channel}
        return self._require_parameters(parameters, 3) or self._require_channel(query)

    def _check_whatsnew(
        self, parameters: PathParameters, query: StructuredQuery
    ) -> Optional[OperationResult]:
        # {product}/whatsnew/{channel}
        failure = self._check_channel_service(parameters, query)
        if failure is not None:
            return failure

        if not self.catalog.get_lang_files(
            query.product, query.channel or "", "whatsnew"
        ):
            return OperationResult.permanent_error(
                f"Whatsnew section is not supported for {query.product} "
                f"on '{query.channel}' channel.",
                error_code=ErrorCode.SECTION_NOT_SUPPORTED,
            )
        return None

    # Helpers

    def _require_parameters(
        self, parameters: PathParameters, number: int
    ) -> Optional[OperationResult]:
        if parameters.count < number:
            return OperationResult.permanent_error(
                NOT_ENOUGH_PARAMETERS, error_code=ErrorCode.NOT_ENOUGH_PARAMETERS
            )
        return None

    def _require_channel(self, query: StructuredQuery) -> Optional[OperationResult]:
        if query.channel not in self.catalog.get_product_channels(query.product):
            return OperationResult.permanent_error(
                f"'{query.channel}' is not a supported channel for {query.product}.",
                error_code=ErrorCode.INVALID_CHANNEL,
            )
        return None
