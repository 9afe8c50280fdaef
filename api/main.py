"""
BMS Telemetry Twin - FastAPI Application

This is the main entry point for the FastAPI backend.
It owns the telemetry engine for the lifetime of the application and
combines all route modules.

Features:
- Live sensor snapshots for BIM elements
- Synthesized channel history for trend charts
- Alerting assets for model highlighting
- WebSocket live updates on every simulation tick
- Interactive API documentation (Swagger/OpenAPI)

Access Points:
- API Root: http://localhost:8000
- Swagger Docs: http://localhost:8000/docs
- ReDoc: http://localhost:8000/redoc
"""

import os
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models import SystemHealth
from api.routes import query_router, profiles_router, stream_router
from engine.config import get_settings
from engine.telemetry import TelemetryEngine

API_VERSION = "0.1.0"

# =========================================
# Logging Configuration
# =========================================

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =========================================
# Application Lifespan
# =========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the telemetry engine on startup and stops its clock on
    shutdown.
    """
    settings = get_settings()
    logger.info("Starting BMS Telemetry API...")

    engine = TelemetryEngine.from_settings(settings)
    app.state.engine = engine

    if settings.load_seed_data:
        engine.initialize(interval=settings.tick_interval_seconds)
    else:
        engine.start(settings.tick_interval_seconds)

    logger.info(
        "BMS Telemetry API started: %d assets, tick every %.1fs",
        len(engine.all_ids()), settings.tick_interval_seconds
    )

    yield

    logger.info("Shutting down BMS Telemetry API...")
    engine.stop()


# =========================================
# FastAPI Application
# =========================================

app = FastAPI(
    title="BMS Telemetry Twin API",
    description="""
## Simulated BMS Telemetry for BIM Digital Twins

Live sensor readings for building elements, keyed by IFC GlobalId.

### Core Concepts

#### Channels
Each element exposes a set of channels (temperature, humidity,
occupancy, CO2, energy, lighting, airflow, pressure). Every channel
has fixed bounds, a unit, and warning/alarm thresholds.

#### Severity
Readings are **normal**, **warning** (at or above the warning
threshold) or **alarm** (at or above the alarm threshold).

#### Live Updates
Readings drift every simulation tick (5 seconds by default). Connect
to `WS /ws/assets/{asset_id}` to receive each update.

### Quick Start

1. **List assets**: `GET /api/v1/assets`
2. **Read an asset**: `GET /api/v1/assets/1hOSwPNfz2Bw_3Z7ePjS2T`
3. **Chart history**: `GET /api/v1/assets/1hOSwPNfz2Bw_3Z7ePjS2T/history/temperature`
4. **Find alerts**: `GET /api/v1/alerts`
    """,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


# =========================================
# CORS Middleware
# =========================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================================
# Exception Handlers
# =========================================

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": True,
            "message": exc.detail,
            "status_code": exc.status_code,
            "timestamp": datetime.now().isoformat()
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": True,
            "message": "An unexpected error occurred",
            "detail": str(exc) if os.getenv("DEBUG", "false").lower() == "true" else None,
            "timestamp": datetime.now().isoformat()
        }
    )


# =========================================
# Include Routers
# =========================================

app.include_router(query_router, prefix="/api/v1")
app.include_router(profiles_router, prefix="/api/v1")
app.include_router(stream_router)


# =========================================
# Root Endpoints
# =========================================

@app.get(
    "/",
    tags=["System"],
    summary="API Root",
    description="Welcome endpoint with API information"
)
async def root():
    """API root endpoint."""
    return {
        "name": "BMS Telemetry Twin API",
        "version": API_VERSION,
        "description": "Simulated BMS telemetry for BIM digital twins",
        "documentation": "/docs",
        "health_check": "/health",
        "api_base": "/api/v1"
    }


@app.get(
    "/health",
    response_model=SystemHealth,
    tags=["System"],
    summary="System Health Check",
    description="Check the API and the simulation clock"
)
async def health_check(request: Request):
    """System health check endpoint."""
    engine: TelemetryEngine = request.app.state.engine
    running = engine.is_running

    return SystemHealth(
        status="ok" if running else "degraded",
        version=API_VERSION,
        timestamp=datetime.now(),
        simulation_running=running,
        tick_interval=engine.clock.interval,
        tick_count=engine.clock.tick_count,
        asset_count=len(engine.all_ids()),
        subscriber_count=engine.subscriptions.subscriber_count(),
        components={
            "api": "ok",
            "simulation": "ok" if running else "stopped",
        }
    )


@app.get(
    "/live",
    tags=["System"],
    summary="Liveness Check",
    description="Check if the API process is alive"
)
async def liveness_check():
    """Kubernetes-style liveness check."""
    return {"alive": True}


# =========================================
# Run with Uvicorn (for development)
# =========================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", 8000)),
        reload=os.getenv("API_RELOAD", "false").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
