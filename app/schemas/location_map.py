# File: app/schemas/location_map.py

from typing import Tuple

from pydantic import BaseModel


# Leaflet takes points as [lat, lng]
LatLng = Tuple[float, float]


class TileLayer(BaseModel):
    url_template: str
    attribution: str
    subdomains: str = "abc"


class MapMarker(BaseModel):
    position: LatLng
    popup_html: str
    open_popup: bool = True


class LocationMap(BaseModel):
    center: LatLng
    zoom: int
    tile_layer: TileLayer
    marker: MapMarker
