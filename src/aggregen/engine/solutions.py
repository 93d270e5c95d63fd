"""Edge construction and solution recording.

Edges are undirected: the two endpoints are held as an unordered pair.
Each completed frame is frozen into a :class:`Solution` that can be
exported as a NetworkX multigraph.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import networkx as nx

from aggregen.domain.types import Edge, Endpoint

if TYPE_CHECKING:
    from aggregen.domain.frame import Frame
    from aggregen.domain.types import Connector, Point


@dataclass(frozen=True)
class Solution:
    """A completed assembly: every connector of every point is joined."""

    points: tuple[Point, ...]
    edges: tuple[Edge, ...]

    def to_graph(self) -> nx.MultiGraph:
        """Return the assembly as an undirected multigraph keyed by point name."""
        g = nx.MultiGraph()
        for pnt in self.points:
            g.add_node(pnt.name)
        for edge in self.edges:
            a, b = edge.first, edge.second
            g.add_edge(
                a.point.name,
                b.point.name,
                connectors=(str(a.connector), str(b.connector)),
            )
        return g

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": [p.name for p in self.points],
            "edges": [
                {
                    "ends": [
                        {"point": end.point.name, "connector": str(end.connector)}
                        for end in (edge.first, edge.second)
                    ]
                }
                for edge in self.edges
            ],
        }


class LinkStyle:
    """Undirected edge builder plus an in-memory solution recorder."""

    def __init__(self) -> None:
        self._solutions: list[Solution] = []

    def make_edge(
        self,
        from_connector: Connector,
        to_connector: Connector,
        from_point: Point,
        to_point: Point,
    ) -> Edge:
        """Return a new undirected edge. Pure; never fails."""
        return create_undirected_link(from_connector, to_connector, from_point, to_point)

    def record_solution(self, frame: Frame) -> Solution:
        solution = Solution(points=tuple(frame.points), edges=tuple(frame.edges))
        self._solutions.append(solution)
        return solution

    @property
    def solutions(self) -> list[Solution]:
        return list(self._solutions)


def create_undirected_link(
    from_connector: Connector,
    to_connector: Connector,
    from_point: Point,
    to_point: Point,
) -> Edge:
    return Edge(Endpoint(from_point, from_connector), Endpoint(to_point, to_connector))
