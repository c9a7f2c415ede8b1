# File: app/gis/location_map.py

"""
Map view for a single listing location.

Describes the same three Leaflet calls static/js/map.js makes:
  - L.map(...).setView(center, zoom)
  - L.tileLayer(url, {attribution}).addTo(map)
  - L.marker(center).bindPopup(html).openPopup()
"""

import logging
from typing import Sequence

from app.schemas.location_map import LocationMap, MapMarker, TileLayer

logger = logging.getLogger(__name__)

DEFAULT_ZOOM = 13

OSM_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

# Precise address is only revealed once a stay is booked
LOCATION_POPUP_HTML = "<b>Exact Location</b><br>Will be shown after booking."


def build_location_map(coordinates: Sequence[float]) -> LocationMap:
    """
    Build the map view for a coordinate pair given as [longitude, latitude]
    (GeoJSON order). Center and marker come out in Leaflet's [lat, lng] order.
    """
    lng, lat = coordinates
    center = (float(lat), float(lng))

    logger.debug("Building location map", extra={"lat": center[0], "lng": center[1]})

    return LocationMap(
        center=center,
        zoom=DEFAULT_ZOOM,
        tile_layer=TileLayer(
            url_template=OSM_TILE_URL,
            attribution=OSM_ATTRIBUTION,
        ),
        marker=MapMarker(
            position=center,
            popup_html=LOCATION_POPUP_HTML,
            open_popup=True,
        ),
    )
