from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from infrastructure.services import (
    APIVersionsDep,
    CatalogDep,
    TranslationFactoryDep,
)
from modules.stores import ParsedURL, StoreAPIRequest, StoreServices

router = APIRouter(tags=["Stores"])


def _raw_path(request: Request) -> str:
    """Return the request path before percent-decoding.

    Starlette decodes request.url.path; the extractor decodes segments itself.
    """
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("utf-8", errors="replace")


# Versioned (/api/v1/...) and legacy unversioned (/api/...) calls share this
# route; the version segment is detected while extracting parameters.
@router.get("/api")
@router.get("/api/{path:path}")
def stores_api(
    request: Request,
    catalog: CatalogDep,
    api_versions: APIVersionsDep,
    translations: TranslationFactoryDep,
):
    """Validate an API call and run the requested service."""
    api_request = StoreAPIRequest(
        ParsedURL(path=_raw_path(request), query=request.url.query or None),
        catalog,
        api_versions,
    )
    headers = {"X-API-Version": api_request.get_current_api_version()}

    verdict = api_request.validate()
    if not verdict.is_success:
        payload, status_code = api_request.invalid_api_call(verdict)
        return JSONResponse(status_code=status_code, content=payload, headers=headers)

    services = StoreServices(catalog, translations)
    return JSONResponse(
        content=services.dispatch(api_request.query, api_request.query_parameters),
        headers=headers,
    )
