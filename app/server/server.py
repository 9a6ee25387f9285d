from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.configuration.settings import settings
from infrastructure.logging import bind_request_context, get_module_logger
from server.lifespan import lifespan

logger = get_module_logger()


def create_app() -> FastAPI:
    """Build the FastAPI application serving locale dictionaries."""
    app = FastAPI(lifespan=lifespan)
    setup_rate_limiter(app)

    if settings.server.CORS_ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.server.CORS_ALLOWED_ORIGINS,
            allow_credentials=False,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get("X-Correlation-ID"),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
            response.headers["X-Correlation-ID"] = correlation_id
            return response

    app.include_router(api_router)
    return app


handler = create_app()
