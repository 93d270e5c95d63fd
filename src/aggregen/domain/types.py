"""Connectors, points, sections and edges.

Connectors are plain values. Points and sections are compared by
identity: two sections built from the same template are distinct graph
material even though they look alike.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Connector:
    """A typed socket: a label plus the pole it presents."""

    label: str
    pole: str

    def __str__(self) -> str:
        return f"{self.label}{self.pole}"


@dataclass(frozen=True, eq=False)
class Point:
    """A vertex under construction."""

    name: str

    def __repr__(self) -> str:
        return f"Point({self.name!r})"


@dataclass(frozen=True, eq=False)
class Section:
    """One point plus its ordered connectors.

    Attributes:
        point: The owning point.
        connectors: Ordered connector sequence; offsets index into it.
        weight: Sampling weight, or None when unset.
        template: The library section this one was materialized from.
        values: Free-form per-object annotations.
    """

    point: Point
    connectors: tuple[Connector, ...]
    weight: float | None = None
    template: Section | None = None
    values: dict[str, Any] = field(default_factory=dict)

    def has_connector(self, connector: Connector) -> bool:
        return connector in self.connectors

    def offsets_of(self, connector: Connector) -> list[int]:
        """Return every offset at which *connector* appears."""
        return [i for i, con in enumerate(self.connectors) if con == connector]

    def materialize(self) -> Section:
        """Return a fresh, independent copy of this section.

        The copy gets a new point and an empty ``values`` dict. Weights
        are not carried over; ``template`` points back at the origin.
        """
        origin = self.template or self
        name = f"{origin.point.name}@{uuid.uuid4().hex[:8]}"
        return Section(point=Point(name), connectors=self.connectors, template=origin)

    def __repr__(self) -> str:
        cons = " ".join(str(c) for c in self.connectors)
        return f"Section({self.point.name}: {cons})"


@dataclass(frozen=True)
class Endpoint:
    """One end of an edge: a point and the connector it used."""

    point: Point
    connector: Connector


@dataclass(frozen=True, eq=False)
class Edge:
    """An undirected connection between two endpoints.

    Neither end is head or tail: ``Edge(a, b) == Edge(b, a)``.
    """

    first: Endpoint
    second: Endpoint

    @property
    def endpoints(self) -> frozenset[Endpoint]:
        return frozenset((self.first, self.second))

    @property
    def points(self) -> tuple[Point, Point]:
        return (self.first.point, self.second.point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __repr__(self) -> str:
        a, b = self.first, self.second
        return f"Edge({a.point.name}.{a.connector} ~ {b.point.name}.{b.connector})"
