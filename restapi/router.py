"""Application configuration and router setup."""

import fastapi
from fastapi.middleware import cors
from fastapi.openapi.utils import get_openapi

from components.core import errors, init_db
from components.core.config import get_settings
from components.core.log import configure_logging
from restapi.endpoints import budgets, dashboard, finance, health_check, inventory, shopping, todos, wedding

DESCRIPTION = "Income, expenses, shopping, inventory, to-dos and budgets of one household"


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging()

    app = fastapi.FastAPI(
        title=settings.APP_NAME,
        description=DESCRIPTION,
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=init_db.lifespan,
    )

    errors.register_error_handlers(app)

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health_check.router)
    app.include_router(dashboard.router)
    for router in finance.routers + inventory.routers:
        app.include_router(router)
    app.include_router(shopping.router)
    app.include_router(todos.router)
    app.include_router(budgets.router)
    app.include_router(wedding.router)

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema
        openapi_schema = get_openapi(
            title=settings.APP_NAME,
            version=settings.API_VERSION,
            description=DESCRIPTION,
            routes=app.routes,
        )
        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi

    return app
