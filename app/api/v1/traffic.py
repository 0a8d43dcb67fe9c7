"""Traffic conditions API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request

from app.core.exceptions import TrafficDataError
from app.core.rate_limit import limiter, rate_limit_traffic
from app.dependencies import get_traffic_service
from app.schemas.traffic import TrafficSnapshotResponse
from app.services.traffic_service import TrafficService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    response_model=TrafficSnapshotResponse,
    summary="Get current traffic conditions",
    description="""
    Simulates current congestion on every monitored road segment.

    Congestion depends on the time of day (morning and evening rush hours,
    night), a seasonal weather draw (monsoon rain, winter fog) and a random
    variation per segment. A new snapshot is generated for every request.
    """,
    responses={
        500: {
            "description": "Traffic simulation failed",
            "content": {
                "application/json": {
                    "example": {"error": "Failed to fetch traffic data", "details": "..."}
                }
            },
        },
    },
)
@limiter.limit(rate_limit_traffic)
async def get_traffic(
    request: Request,
    traffic_service: TrafficService = Depends(get_traffic_service),
):
    """Get a fresh traffic snapshot."""
    try:
        snapshot = traffic_service.simulate_traffic()
    except Exception as e:
        logger.error(f"Error generating traffic data: {str(e)}", exc_info=True)
        raise TrafficDataError(str(e)) from e

    return TrafficSnapshotResponse.from_snapshot(snapshot)
