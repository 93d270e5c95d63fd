"""Frame: one branch point's worth of partial-assembly state.

A frame tracks which sections have been placed, which of their connector
offsets are already joined, and the edges built so far. Child frames are
produced by :meth:`Frame.branch`, which copies the containers but shares
the (immutable) sections themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aggregen.domain.types import Connector, Edge, Point, Section


class Frame:
    """Placed sections, their connected offsets, and edges so far."""

    def __init__(self, depth: int = 0) -> None:
        self.depth = depth
        self.sections: list[Section] = []
        self.edges: list[Edge] = []
        self._linked: dict[Section, set[int]] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __contains__(self, section: object) -> bool:
        return section in self._linked

    @property
    def points(self) -> list[Point]:
        return [s.point for s in self.sections]

    @property
    def open_sections(self) -> list[Section]:
        """Placed sections that still have an unconnected connector."""
        return [s for s in self.sections if len(self._linked[s]) < len(s.connectors)]

    @property
    def is_complete(self) -> bool:
        return not self.open_sections

    def unconnected(self, section: Section) -> list[int]:
        """Offsets of *section* that are not yet joined by an edge."""
        linked = self._linked[section]
        return [i for i in range(len(section.connectors)) if i not in linked]

    def is_connected(self, section: Section, offset: int) -> bool:
        return offset in self._linked[section]

    def exposing(self, connector: Connector) -> list[Section]:
        """Open sections offering *connector* at an unconnected offset.

        A section offering it at several offsets is listed once per offset.
        """
        found: list[Section] = []
        for sect in self.open_sections:
            for offset in self.unconnected(sect):
                if sect.connectors[offset] == connector:
                    found.append(sect)
        return found

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, section: Section) -> None:
        """Add *section* to the frame. Placing it twice is a no-op."""
        if section in self._linked:
            return
        self.sections.append(section)
        self._linked[section] = set()

    def connect(self, section: Section, offset: int) -> None:
        """Mark connector *offset* of *section* as joined."""
        if section not in self._linked:
            msg = f"{section!r} is not placed in this frame"
            raise ValueError(msg)
        if not 0 <= offset < len(section.connectors):
            msg = f"Offset {offset} out of range for {section!r}"
            raise ValueError(msg)
        if offset in self._linked[section]:
            msg = f"Offset {offset} of {section!r} is already connected"
            raise ValueError(msg)
        self._linked[section].add(offset)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def branch(self) -> Frame:
        """Return a child frame that can diverge without touching this one."""
        child = Frame(depth=self.depth + 1)
        child.sections = list(self.sections)
        child.edges = list(self.edges)
        child._linked = {sect: set(offsets) for sect, offsets in self._linked.items()}
        return child

    def __repr__(self) -> str:
        return (
            f"Frame(depth={self.depth}, sections={len(self.sections)}, "
            f"open={len(self.open_sections)}, edges={len(self.edges)})"
        )
