"""
REST API main application.
Entry point for the FastAPI REST server.

Routes:
- /users, /stores, /brands: back-office CRUD
- /admin/tables: admin grid/form declarations
- /api/users, /api/stores, /api/brands: paginated mobile listings
- /health, /health/detailed: health checks
"""

from fastapi import FastAPI

from rest_api.core.cors import configure_cors
from rest_api.core.exception_handlers import register_exception_handlers
from rest_api.core.lifespan import lifespan
from rest_api.core.middlewares import register_middlewares
from rest_api.routers.admin import router as admin_router
from rest_api.routers.mobile import router as mobile_router
from rest_api.routers.public import health_router
from shared.config.settings import settings
from shared.infrastructure.correlation import CorrelationIdMiddleware


app = FastAPI(
    title="Retail Catalog API",
    description="Back-office CRUD and mobile listings for users, stores and brands",
    version="0.1.0",
    lifespan=lifespan,
)

# Middlewares (last registered runs first)
register_middlewares(app)
configure_cors(app)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router)
app.include_router(admin_router)
app.include_router(mobile_router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rest_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=settings.debug,
    )
