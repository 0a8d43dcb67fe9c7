"""Custom exception classes."""

from typing import Optional

from fastapi import status


class TrafficRouteException(Exception):
    """Base exception for the traffic router application."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class InvalidLocationError(TrafficRouteException):
    """Origin or destination is not a known location."""

    def __init__(self, message: str = "Invalid location specified"):
        super().__init__(message)


class IdenticalEndpointsError(TrafficRouteException):
    """Origin and destination name the same location."""

    def __init__(self, message: str = "Origin and destination cannot be the same"):
        super().__init__(message)


class MissingParameterError(TrafficRouteException):
    """Origin or destination absent from the request."""

    def __init__(self, message: str = "Origin and destination are required"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class RouteCalculationError(TrafficRouteException):
    """Route computation failed."""

    def __init__(self, details: str, message: str = "Failed to calculate alternate routes"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


class TrafficDataError(TrafficRouteException):
    """Traffic snapshot generation failed."""

    def __init__(self, details: str, message: str = "Failed to fetch traffic data"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)
