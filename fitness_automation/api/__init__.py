from .client import (
    ApiResponse,
    FitnessAPIError,
    FitnessReadClient,
    FitnessWriteClient,
    RoutineTracker,
)

__all__ = [
    "ApiResponse",
    "FitnessAPIError",
    "FitnessReadClient",
    "FitnessWriteClient",
    "RoutineTracker",
]
