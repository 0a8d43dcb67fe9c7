"""Traffic snapshot response schemas."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from app.models.traffic import TrafficReading, TrafficSnapshot


class TrafficSegment(BaseModel):
    """Simulated conditions on one road segment."""

    id: int
    name: str
    base_speed: int = Field(..., alias="baseSpeed", description="Uncongested speed in km/h")
    current_speed: int = Field(..., gt=0, alias="currentSpeed")
    congestion_percent: int = Field(..., ge=0, alias="congestionPercent")
    level: str = Field(..., description="LOW, MODERATE, HIGH or SEVERE")

    class Config:
        populate_by_name = True

    @classmethod
    def from_reading(cls, reading: TrafficReading) -> "TrafficSegment":
        return cls(
            id=reading.segment_id,
            name=reading.segment_name,
            base_speed=reading.base_speed,
            current_speed=reading.current_speed,
            congestion_percent=reading.congestion_percent,
            level=reading.level,
        )


class TrafficSnapshotResponse(BaseModel):
    """Traffic conditions for every road segment at one instant."""

    timestamp: datetime
    weather: str = Field(..., description="clear, rain or fog")
    time_period: str = Field(
        ...,
        alias="timePeriod",
        description="morning-rush, evening-rush, normal or night",
    )
    segments: List[TrafficSegment]

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "timestamp": "2025-07-14T09:30:00+05:30",
                "weather": "rain",
                "timePeriod": "morning-rush",
                "segments": [
                    {
                        "id": 1,
                        "name": "Outer Ring Road",
                        "baseSpeed": 60,
                        "currentSpeed": 24,
                        "congestionPercent": 60,
                        "level": "HIGH",
                    }
                ],
            }
        }

    @classmethod
    def from_snapshot(cls, snapshot: TrafficSnapshot) -> "TrafficSnapshotResponse":
        return cls(
            timestamp=snapshot.timestamp,
            weather=snapshot.weather,
            time_period=snapshot.time_period,
            segments=[TrafficSegment.from_reading(reading) for reading in snapshot.readings],
        )
