"""
Asset Query Endpoints

This module provides endpoints for querying live BMS data. It backs
the viewer's sensor panel: look up the assets behind a selection,
chart a channel's history, and list everything currently alerting.

Key Features:
- Point and bulk snapshot lookup
- Runtime asset registration
- Synthesized channel history
- Alerting assets
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.deps import asset_to_response, get_engine
from api.models import (
    AlertsResponse,
    AssetBatchRequest,
    AssetBatchResponse,
    AssetListResponse,
    AssetResponse,
    ChannelType,
    HistoryPoint,
    HistoryResponse,
    RegisterAssetRequest,
)
from engine.telemetry import TelemetryEngine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Assets"])


# =========================================
# Asset Endpoints
# =========================================

@router.get(
    "/assets",
    response_model=AssetListResponse,
    summary="List registered assets",
    description="Get the identifiers of every asset with BMS data."
)
async def list_assets(engine: TelemetryEngine = Depends(get_engine)):
    """List registered asset ids."""
    asset_ids = engine.all_ids()
    return AssetListResponse(count=len(asset_ids), asset_ids=asset_ids)


@router.post(
    "/assets",
    response_model=AssetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an asset",
    description="""
    Link an element to BMS channels at runtime.

    Registering an id that already exists replaces its channel set
    and restarts its readings.
    """
)
async def register_asset(
    request: RegisterAssetRequest,
    engine: TelemetryEngine = Depends(get_engine)
):
    """Register (or replace) an asset."""
    asset = engine.add_asset(
        request.asset_id,
        request.display_name,
        [channel.value for channel in request.channels],
    )
    return asset_to_response(asset)


@router.post(
    "/assets/batch",
    response_model=AssetBatchResponse,
    summary="Bulk asset lookup",
    description="""
    Get snapshots for several assets at once.

    Ids without BMS data are omitted from the result rather than
    reported as errors.
    """
)
async def get_assets_batch(
    request: AssetBatchRequest,
    engine: TelemetryEngine = Depends(get_engine)
):
    """Get snapshots for a batch of assets."""
    found = await engine.get_many(request.asset_ids)
    return AssetBatchResponse(
        requested=len(request.asset_ids),
        found=len(found),
        assets={asset_id: asset_to_response(a) for asset_id, a in found.items()},
    )


@router.get(
    "/assets/{asset_id}",
    response_model=AssetResponse,
    summary="Get asset snapshot",
    description="Get the current readings of one asset."
)
async def get_asset(
    asset_id: str,
    engine: TelemetryEngine = Depends(get_engine)
):
    """Get one asset's current readings."""
    asset = await engine.get_one(asset_id)
    if asset is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No BMS data for asset: {asset_id}"
        )
    return asset_to_response(asset)


# =========================================
# History Endpoints
# =========================================

@router.get(
    "/assets/{asset_id}/history/{channel}",
    response_model=HistoryResponse,
    summary="Get channel history",
    description="""
    Get historical values for one channel at 15-minute spacing,
    ending now.

    **Parameters:**
    - `hours`: Number of hours of history (default: 24, max: 720 = 30 days)

    History depends only on the channel kind; the asset does not need
    to expose that channel.
    """
)
async def get_history(
    asset_id: str,
    channel: ChannelType,
    hours: int = Query(default=24, ge=1, le=720, description="Hours of history"),
    engine: TelemetryEngine = Depends(get_engine)
):
    """Get synthesized history for a channel."""
    points = await engine.get_history(asset_id, channel.value, hours)
    profile = engine.profile(channel.value)
    return HistoryResponse(
        asset_id=asset_id,
        channel=channel,
        unit=profile.unit,
        hours=hours,
        count=len(points),
        points=[HistoryPoint(timestamp=p.timestamp, value=p.value) for p in points],
    )


# =========================================
# Alert Endpoints
# =========================================

@router.get(
    "/alerts",
    response_model=AlertsResponse,
    summary="Get alerting assets",
    description="Get every asset with at least one channel in warning or alarm."
)
async def get_alerts(engine: TelemetryEngine = Depends(get_engine)):
    """Get assets with warnings or alarms."""
    alerts = engine.assets_with_alerts()
    return AlertsResponse(
        timestamp=datetime.now(),
        count=len(alerts),
        assets={asset_id: asset_to_response(a) for asset_id, a in alerts.items()},
    )
