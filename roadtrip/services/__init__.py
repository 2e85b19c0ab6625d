"""Services layer - Application orchestration.

Available services:
- TripPlannerService: Plans trips on a road map and renders the results
"""

from .trip_planner import TripPlannerService

__all__ = ["TripPlannerService"]
