"""Reference data repository for locations and road segments.

The catalogs are static and shared process-wide; nothing here is ever
mutated after import.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from app.models.location import Location, RoadSegment

LOCATIONS: Mapping[str, Location] = MappingProxyType(
    {
        location.name: location
        for location in (
            Location("koramangala", 12.9279, 77.6271),
            Location("electronic-city", 12.8458, 77.6692),
            Location("whitefield", 12.9698, 77.7499),
            Location("indiranagar", 12.9784, 77.6408),
            Location("marathahalli", 12.9591, 77.6974),
            Location("bannerghatta", 12.8997, 77.5968),
            Location("hebbal", 13.0358, 77.5970),
            Location("jp-nagar", 12.9078, 77.5929),
            Location("majestic", 12.9766, 77.5713),
            Location("airport", 13.1989, 77.7068),
        )
    }
)

ROAD_SEGMENTS: Tuple[RoadSegment, ...] = (
    RoadSegment(1, "Outer Ring Road", 60),
    RoadSegment(2, "Silk Board Junction", 30),
    RoadSegment(3, "Old Airport Road", 45),
    RoadSegment(4, "Hosur Road", 50),
    RoadSegment(5, "Marathahalli Bridge", 40),
)


class LocationRepository:
    """Read-only access to the location and road segment catalogs."""

    def __init__(
        self,
        locations: Mapping[str, Location] = LOCATIONS,
        road_segments: Tuple[RoadSegment, ...] = ROAD_SEGMENTS,
    ):
        self._locations = locations
        self._road_segments = road_segments

    def resolve_location(self, name: str) -> Optional[Location]:
        """Find a location by name, ignoring case.

        Returns:
            The matching Location, or None if the name is unknown
        """
        if not name:
            return None
        return self._locations.get(name.lower())

    def list_locations(self) -> List[Location]:
        return list(self._locations.values())

    def get_road_segments(self) -> Tuple[RoadSegment, ...]:
        return self._road_segments
