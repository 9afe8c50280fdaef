"""
Channel Profile Endpoints

Bounds, units and thresholds per channel kind, for callers that
render gauges and chart axes.
"""

from typing import List

from fastapi import APIRouter

from api.models import ChannelType, ProfileResponse
from core.profiles import ChannelProfile, all_profiles, get_profile

router = APIRouter(prefix="/profiles", tags=["Channel Profiles"])


def profile_to_response(profile: ChannelProfile) -> ProfileResponse:
    return ProfileResponse(**profile.to_dict())


@router.get(
    "",
    response_model=List[ProfileResponse],
    summary="List channel profiles"
)
async def list_profiles():
    """Get every channel profile."""
    return [profile_to_response(p) for p in all_profiles()]


@router.get(
    "/{channel}",
    response_model=ProfileResponse,
    summary="Get channel profile"
)
async def get_channel_profile(channel: ChannelType):
    """Get the profile for one channel kind."""
    return profile_to_response(get_profile(channel.value))
