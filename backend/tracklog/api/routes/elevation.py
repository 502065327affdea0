"""
Elevation Routes

Proxy for the elevation API so browsers avoid CORS restrictions.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tracklog.api.deps import get_elevation_client
from tracklog.features.elevation import ElevationClient
from tracklog.shared.errors import UpstreamError

router = APIRouter()


@router.get("/elevation")
async def get_elevation(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    client: ElevationClient = Depends(get_elevation_client)
):
    """Return the upstream JSON for one coordinate."""
    if not lat or not lon:
        return JSONResponse({"error": "Missing lat/lon"}, status_code=400)

    try:
        payload = await client.lookup(lat, lon)
    except UpstreamError:
        return JSONResponse({"error": "Failed to fetch elevation"}, status_code=500)

    return JSONResponse(payload)
