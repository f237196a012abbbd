"""Registry-wide use cases."""

from .get_total_counts import GetTotalCountsResponse, GetTotalCountsUseCase

__all__ = [
    "GetTotalCountsResponse",
    "GetTotalCountsUseCase",
]
