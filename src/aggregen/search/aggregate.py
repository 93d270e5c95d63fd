"""Aggregate: depth-first assembly driver.

Starting from copies of the root sections, the driver repeatedly takes
the first unconnected connector of the first open section, asks the
callback for a section carrying a mating connector, joins the two in a
child frame and recurses. A frame without open sections is a solution.

All choices are delegated to the callback; the driver only decides
where to branch and brackets every branch with push_frame/pop_frame.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aggregen.domain.frame import Frame
from aggregen.search.parameters import Parameters

if TYPE_CHECKING:
    from collections.abc import Sequence

    from aggregen.domain.types import Connector, Section
    from aggregen.engine.callback import GenerateCallback
    from aggregen.library.dictionary import Dictionary

logger = logging.getLogger(__name__)


class Aggregate:
    """Drive a :class:`GenerateCallback` through a depth-first search."""

    def __init__(
        self,
        dictionary: Dictionary,
        callback: GenerateCallback,
        parameters: Parameters | None = None,
    ) -> None:
        self._dict = dictionary
        self._cb = callback
        self._params = parameters or Parameters()
        self._halted = False
        self.solutions_found = 0

    def aggregate(self, roots: Sequence[Section]) -> int:
        """Assemble graphs grown from *roots*; return the solutions found."""
        frame = Frame()
        for root in roots:
            frame.place(root.materialize())

        self._halted = False
        self.solutions_found = 0
        self._params.reset()
        # The root frame gets its own level so no cache outlives the run.
        self._cb.push_frame(frame)
        try:
            self._extend(frame)
        finally:
            self._cb.pop_frame(frame)
        logger.debug(
            "Aggregation finished: %d solutions, %d steps",
            self.solutions_found,
            self._params.steps_taken,
        )
        return self.solutions_found

    def _extend(self, frame: Frame) -> None:
        if not self._cb.should_continue(frame):
            self._halted = True
            return
        if frame.is_complete:
            self.solutions_found += 1
            self._cb.on_solution(frame)
            return
        if self._params.prune(frame):
            logger.debug("Pruned %r", frame)
            return

        fm_sect = frame.open_sections[0]
        offset = frame.unconnected(fm_sect)[0]
        fm_con = fm_sect.connectors[offset]
        attempts = 1 if self._cb.deterministic else self._params.attempts

        for to_con in self._dict.mates(fm_con):
            for _ in range(attempts):
                if self._halted:
                    return
                to_sect = self._cb.select(frame, fm_sect, to_con)
                if to_sect is None:
                    break
                child = self._attach(frame, fm_sect, offset, to_sect, to_con)
                if child is None:
                    continue
                self._cb.push_frame(child)
                try:
                    self._extend(child)
                finally:
                    self._cb.pop_frame(child)

    def _attach(
        self,
        frame: Frame,
        fm_sect: Section,
        offset: int,
        to_sect: Section,
        to_con: Connector,
    ) -> Frame | None:
        """Join *fm_sect* at *offset* to a free *to_con* on *to_sect*."""
        child = frame.branch()
        child.place(to_sect)
        free = [
            i
            for i in to_sect.offsets_of(to_con)
            if not child.is_connected(to_sect, i) and not (to_sect is fm_sect and i == offset)
        ]
        if not free:
            return None

        fm_con = fm_sect.connectors[offset]
        child.connect(fm_sect, offset)
        child.connect(to_sect, free[0])
        child.add_edge(self._cb.make_edge(fm_con, to_con, fm_sect.point, to_sect.point))
        return child
