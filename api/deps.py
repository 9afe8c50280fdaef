"""
Shared API Dependencies

Dependency injection for the telemetry engine, plus conversion of
engine snapshots into response models.
"""

from fastapi import Request

from api.models import AssetResponse, ChannelReading, ChannelType, SeverityLevel
from core.assets import MonitoredAsset
from core.readings import format_reading, severity_color
from engine.telemetry import TelemetryEngine


def get_engine(request: Request) -> TelemetryEngine:
    """
    Dependency that provides the application's telemetry engine.

    Usage in FastAPI:
        @router.get("/assets")
        def list_assets(engine: TelemetryEngine = Depends(get_engine)):
            return engine.all_ids()
    """
    return request.app.state.engine


def asset_to_response(asset: MonitoredAsset) -> AssetResponse:
    """Convert an asset snapshot to its API model."""
    readings = [
        ChannelReading(
            channel=ChannelType(kind.value),
            value=reading.value,
            unit=reading.unit,
            formatted=format_reading(reading),
            timestamp=reading.timestamp,
            severity=SeverityLevel(reading.severity.value),
            color=f"#{severity_color(reading.severity):06x}",
        )
        for kind, reading in asset.readings.items()
    ]
    return AssetResponse(
        asset_id=asset.asset_id,
        display_name=asset.display_name,
        readings=readings,
        last_updated=asset.last_updated,
        has_alert=asset.has_alert,
    )
