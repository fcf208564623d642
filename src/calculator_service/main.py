"""Main FastAPI application for calculator-service."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calculator_service.config import settings
from calculator_service.api import register_error_handlers
from calculator_service.api.routes.calculate import router as calculate_router
from calculator_service.core import Calculator
from calculator_service.models import HealthResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared calculator on startup."""
    logger.info(f"Starting {settings.service_name} on port {settings.port}")
    logger.info(f"Environment: {settings.environment}")
    app.state.calculator = Calculator()
    yield
    logger.info("Shutting down service")


# Create FastAPI app
app = FastAPI(
    title="Calculator Service",
    description="Health check and two-operand sum/product calculation",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(calculate_router)


@app.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="""
Returns the health status of the Calculator Service.

**Response Example**:
```json
{"status": "UP"}
```

**Use Cases**:
- Kubernetes liveness/readiness probes
- Load balancer health checks
- Docker Compose healthcheck
    """,
    responses={
        200: {"description": "Service is up"},
    }
)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="UP")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "calculator_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )
