"""
Pydantic Models for API Request/Response Validation

This module defines all the data models used by the API for:
- Request body validation
- Response serialization
- Documentation generation (OpenAPI/Swagger)

All models use Pydantic v2 syntax for validation and serialization.
"""

from datetime import datetime
from typing import Optional, List, Dict
from enum import Enum
from pydantic import BaseModel, Field, field_validator


# =========================================
# Enums
# =========================================

class ChannelType(str, Enum):
    """Monitored channel kinds."""
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    OCCUPANCY = "occupancy"
    CO2 = "co2"
    ENERGY = "energy"
    LIGHTING = "lighting"
    AIRFLOW = "airflow"
    PRESSURE = "pressure"


class SeverityLevel(str, Enum):
    """Reading severity levels."""
    NORMAL = "normal"
    WARNING = "warning"
    ALARM = "alarm"


# =========================================
# Asset Models
# =========================================

class ChannelReading(BaseModel):
    """Current reading of a single channel."""
    channel: ChannelType = Field(..., description="Channel kind")
    value: float = Field(..., description="Current value")
    unit: str = Field(..., description="Engineering unit")
    formatted: str = Field(..., description="Value with unit, ready for display")
    timestamp: datetime = Field(..., description="Time the reading was generated")
    severity: SeverityLevel = Field(..., description="normal, warning or alarm")
    color: str = Field(..., description="Status colour as #RRGGBB")


class AssetResponse(BaseModel):
    """Snapshot of a monitored asset."""
    asset_id: str = Field(..., description="Asset identifier (IFC GlobalId)")
    display_name: str = Field(..., description="Element name")
    readings: List[ChannelReading] = Field(
        default_factory=list,
        description="Current reading per channel"
    )
    last_updated: datetime = Field(..., description="Time of the last update")
    has_alert: bool = Field(..., description="Any channel in warning or alarm")


class AssetListResponse(BaseModel):
    """Registered asset identifiers."""
    count: int = Field(..., description="Number of registered assets")
    asset_ids: List[str] = Field(default_factory=list, description="Asset identifiers")


class RegisterAssetRequest(BaseModel):
    """Request body for registering an asset at runtime."""
    asset_id: str = Field(
        ...,
        description="Asset identifier (IFC GlobalId)",
        min_length=1,
        max_length=64
    )
    display_name: str = Field(
        ...,
        description="Element name",
        min_length=1,
        max_length=200
    )
    channels: List[ChannelType] = Field(
        ...,
        description="Channel kinds the asset exposes",
        min_length=1
    )

    @field_validator("channels")
    @classmethod
    def unique_channels(cls, v: List[ChannelType]) -> List[ChannelType]:
        """Drop repeated channel kinds, keeping first occurrence order."""
        return list(dict.fromkeys(v))

    class Config:
        json_schema_extra = {
            "example": {
                "asset_id": "4kLmN9Rw31SaYbZcJhVuP8",
                "display_name": "Pump P-01",
                "channels": ["pressure", "energy", "temperature"]
            }
        }


class AssetBatchRequest(BaseModel):
    """Request body for bulk asset lookup."""
    asset_ids: List[str] = Field(
        ...,
        description="Asset identifiers to look up",
        min_length=1,
        max_length=1000
    )


class AssetBatchResponse(BaseModel):
    """Snapshots for the requested assets that exist."""
    requested: int = Field(..., description="Number of ids requested")
    found: int = Field(..., description="Number of ids with data")
    assets: Dict[str, AssetResponse] = Field(
        default_factory=dict,
        description="Snapshots keyed by asset id (unknown ids omitted)"
    )


class AlertsResponse(BaseModel):
    """Assets with at least one channel in warning or alarm."""
    timestamp: datetime = Field(..., description="Time of the query")
    count: int = Field(..., description="Number of assets with alerts")
    assets: Dict[str, AssetResponse] = Field(default_factory=dict)


# =========================================
# History Models
# =========================================

class HistoryPoint(BaseModel):
    """A single historical value."""
    timestamp: datetime
    value: float


class HistoryResponse(BaseModel):
    """Synthesized history for one channel."""
    asset_id: str = Field(..., description="Asset identifier")
    channel: ChannelType = Field(..., description="Channel kind")
    unit: str = Field(..., description="Engineering unit")
    hours: int = Field(..., description="Hours of history")
    count: int = Field(..., description="Number of points")
    points: List[HistoryPoint] = Field(default_factory=list)


# =========================================
# Profile Models
# =========================================

class ProfileResponse(BaseModel):
    """Bounds, unit and thresholds for a channel kind."""
    kind: ChannelType
    min_value: float
    max_value: float
    unit: str
    warning_threshold: float
    alarm_threshold: float


# =========================================
# System Models
# =========================================

class SystemHealth(BaseModel):
    """API and simulation health."""
    status: str = Field(..., description="ok or degraded")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(..., description="Time of the check")
    simulation_running: bool = Field(..., description="Simulation clock is ticking")
    tick_interval: Optional[float] = Field(None, description="Seconds between ticks")
    tick_count: int = Field(..., description="Ticks since startup")
    asset_count: int = Field(..., description="Registered assets")
    subscriber_count: int = Field(..., description="Active live-update subscriptions")
    components: Dict[str, str] = Field(default_factory=dict)
