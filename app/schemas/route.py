"""Route recommendation response schemas."""

from typing import List

from pydantic import BaseModel, Field

from app.models.location import Location
from app.models.route import ScoredRoute


class LocationResponse(BaseModel):
    """Known location that can be used as an origin or destination."""

    name: str
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    @classmethod
    def from_location(cls, location: Location) -> "LocationResponse":
        return cls(name=location.name, lat=location.lat, lng=location.lng)


class AreaInfo(BaseModel):
    name: str


class RouteTrafficInfo(BaseModel):
    origin_area: AreaInfo = Field(..., alias="originArea")
    destination_area: AreaInfo = Field(..., alias="destinationArea")

    class Config:
        populate_by_name = True


class RouteResponse(BaseModel):
    """Single route option annotated with current traffic."""

    id: str
    name: str
    distance: float = Field(..., description="Approximate road distance in km")
    base_duration: int = Field(
        ..., alias="baseDuration", description="Travel time without traffic, minutes"
    )
    segments: List[str] = Field(..., description="Location names used for traffic matching")
    route_description: str = Field(..., alias="routeDescription")
    coordinates: List[List[float]] = Field(..., description="Polyline as [lat, lng] pairs")
    traffic_info: RouteTrafficInfo = Field(..., alias="trafficInfo")
    estimated_duration: int = Field(..., ge=1, alias="estimatedDuration")
    congestion_level: str = Field(..., alias="congestionLevel")
    avg_congestion: float = Field(..., ge=1.0, alias="avgCongestion")
    recommendation: str

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "route-orr",
                "name": "Route via Outer Ring Road through Hebbal and Marathahalli",
                "distance": 15.6,
                "baseDuration": 31,
                "segments": ["koramangala", "hebbal", "marathahalli", "whitefield"],
                "routeDescription": "via Outer Ring Road through Hebbal and Marathahalli",
                "coordinates": [[12.9279, 77.6271], [12.9698, 77.7499]],
                "trafficInfo": {
                    "originArea": {"name": "koramangala"},
                    "destinationArea": {"name": "whitefield"},
                },
                "estimatedDuration": 31,
                "congestionLevel": "LOW",
                "avgCongestion": 1.0,
                "recommendation": "RECOMMENDED - Fastest Route",
            }
        }

    @classmethod
    def from_scored(cls, scored: ScoredRoute) -> "RouteResponse":
        route = scored.route
        return cls(
            id=route.id,
            name=route.name,
            distance=route.distance_km,
            base_duration=route.base_duration_min,
            segments=list(route.named_segments),
            route_description=route.description,
            coordinates=[[lat, lng] for lat, lng in route.coordinates],
            traffic_info=RouteTrafficInfo(
                origin_area=AreaInfo(name=route.origin),
                destination_area=AreaInfo(name=route.destination),
            ),
            estimated_duration=scored.estimated_duration_min,
            congestion_level=scored.congestion_level,
            avg_congestion=scored.avg_congestion_factor,
            recommendation=scored.recommendation,
        )
