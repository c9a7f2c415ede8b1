# app/api/v1/routes_map.py

from fastapi import APIRouter, Query

from app.gis.location_map import build_location_map
from app.schemas.location_map import LocationMap

router = APIRouter(tags=["map"])


@router.get(
    "/location",
    response_model=LocationMap,
    summary="Map view for a listing location",
)
def get_location_map(
    lng: float = Query(..., description="Longitude"),
    lat: float = Query(..., description="Latitude"),
):
    """
    Return the map setup (center, zoom, tiles, marker + popup)
    the frontend hands to Leaflet.
    """
    return build_location_map([lng, lat])
