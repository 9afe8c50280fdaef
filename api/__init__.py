"""
API Module - FastAPI Backend

This module exposes the BMS telemetry engine over HTTP and WebSocket
for viewers and integrations running outside the engine's process.

Key Components:
- main.py: FastAPI application, engine lifecycle and system endpoints
- models.py: Pydantic schemas for request/response validation
- deps.py: Engine dependency and snapshot conversion
- routes/: API endpoint implementations

Endpoints:
- GET /api/v1/assets: Registered asset ids
- GET /api/v1/assets/{asset_id}: Current readings
- POST /api/v1/assets/batch: Bulk lookup
- GET /api/v1/assets/{asset_id}/history/{channel}: Channel history
- GET /api/v1/alerts: Assets in warning or alarm
- WS /ws/assets/{asset_id}: Live updates
"""

__version__ = "0.1.0"
