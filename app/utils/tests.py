from fastapi import FastAPI

from api.dependencies.rate_limits import setup_rate_limiter


def create_test_app(routers, dependency_overrides=None) -> FastAPI:
    """
    Create a FastAPI test application with the given routers.

    Args:
        routers: A router or list of routers to include in the app.
        dependency_overrides: Optional mapping of provider -> override callable.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app([router1], {get_dictionary_resolver: lambda: resolver})
    """
    app = FastAPI()

    setup_rate_limiter(app)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    if dependency_overrides:
        app.dependency_overrides.update(dependency_overrides)

    return app
