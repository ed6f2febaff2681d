from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI


def create_test_app(
    routers,
    middlewares=None,
    dependency_overrides: Optional[Dict[Callable[..., Any], Callable[..., Any]]] = None,
) -> FastAPI:
    """
    Create a FastAPI test application with the given routers and middlewares.

    Args:
        routers: The router, or list of routers, to include in the app.
        middlewares: Optional list of (middleware_class, config_dict) tuples.
        dependency_overrides: Optional {provider: replacement} mapping, used to
            inject test catalogs and translation factories.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app(
            [router1, router2],
            dependency_overrides={get_catalog: lambda: catalog},
        )
    """
    app = FastAPI()

    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    if dependency_overrides:
        app.dependency_overrides.update(dependency_overrides)

    return app
