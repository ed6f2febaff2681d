"""Build a StructuredQuery from the path parameters of an API call."""

from modules.stores.catalog import CatalogRegistry
from modules.stores.models import PathParameters, QueryType, StructuredQuery

STORE_SERVICES = frozenset({"localesmapping", "storelocales"})


def classify(parameters: PathParameters, catalog: CatalogRegistry) -> StructuredQuery:
    """Determine the service, the query type and the queried values.

    The service (second segment) is analyzed first, then the first segment
    is read as a store or a product depending on the service. Missing
    segments leave their field unset; validity is decided by the validator.

    Args:
        parameters: Extracted path parameters.
        catalog: Catalog used to resolve product codes and stores.

    Returns:
        StructuredQuery for the request.
    """
    service = parameters.get(1)
    query_type = QueryType.STORE if service in STORE_SERVICES else QueryType.PRODUCT

    product = ""
    store = ""
    identifier = parameters.get(0)
    if identifier is not None:
        if query_type == QueryType.STORE:
            store = identifier
        else:
            # Convert legacy product IDs to updated ones
            product = catalog.get_updated_product_code(identifier)
            store = catalog.get_product_store(product)

    locale = parameters.get(3) if service == "translation" else None

    return StructuredQuery(
        query_type=query_type,
        service=service,
        product=product,
        store=store,
        channel=parameters.get(2),
        locale=locale,
    )
