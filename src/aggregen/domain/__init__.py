"""Domain layer: pure value types, no infrastructure dependencies."""

from aggregen.domain.frame import Frame
from aggregen.domain.types import Connector, Edge, Endpoint, Point, Section

__all__ = ["Connector", "Edge", "Endpoint", "Frame", "Point", "Section"]
