"""Search driver: depth-first assembly over a GenerateCallback."""

from aggregen.search.aggregate import Aggregate
from aggregen.search.parameters import Parameters

__all__ = ["Aggregate", "Parameters"]
