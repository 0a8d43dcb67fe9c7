"""Route recommendation API endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from app.core.exceptions import MissingParameterError, RouteCalculationError
from app.core.rate_limit import limiter, rate_limit_routes
from app.dependencies import get_route_planner
from app.schemas.route import RouteResponse
from app.services.route_planner import RoutePlanner

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    response_model=List[RouteResponse],
    summary="Get ranked route options",
    description="""
    Get route alternatives between two known locations, ranked by travel time.

    Three routes are generated (Outer Ring Road, City Center and Peripheral),
    each scored against current simulated traffic on the road segments it
    passes. Routes are sorted by estimated duration.

    **Recommendations:**
    - `RECOMMENDED - Fastest Route`: the first route
    - `Good Alternative - Light Traffic`: other routes with low congestion
    - `Backup Route - Higher Congestion`: everything else
    """,
    responses={
        400: {
            "description": "Origin or destination missing",
            "content": {
                "application/json": {"example": {"error": "Origin and destination are required"}}
            },
        },
        500: {
            "description": "Unknown location, identical endpoints or computation failure",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Failed to calculate alternate routes",
                        "details": "Invalid location specified",
                    }
                }
            },
        },
    },
)
@limiter.limit(rate_limit_routes)
async def get_routes(
    request: Request,
    origin: Optional[str] = Query(None, description="Origin location name"),
    destination: Optional[str] = Query(None, description="Destination location name"),
    planner: RoutePlanner = Depends(get_route_planner),
):
    """Get traffic-scored route alternatives."""
    if not origin or not destination:
        logger.info("Missing required parameters")
        raise MissingParameterError()

    try:
        ranked = planner.get_alternate_routes(origin, destination)
    except Exception as e:
        logger.error(f"Error calculating routes: {str(e)}", exc_info=True)
        raise RouteCalculationError(str(e)) from e

    return [RouteResponse.from_scored(scored) for scored in ranked]
