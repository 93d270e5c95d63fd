"""GenerateCallback: the interface a search driver calls into.

The driver owns branching and backtracking; a callback decides what to
attach next and when to stop. Strategies differ only in how they pick
candidates, so solution accounting lives in :class:`BasicCallback`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

import numpy as np

from aggregen.config.models import SelectionConfig
from aggregen.engine.solutions import LinkStyle

if TYPE_CHECKING:
    from aggregen.domain.frame import Frame
    from aggregen.domain.types import Connector, Edge, Point, Section
    from aggregen.library.dictionary import Dictionary

logger = logging.getLogger(__name__)

Continuation: TypeAlias = "Callable[[Frame], bool]"


class GenerateCallback(ABC):
    """Capability set shared by every assembly strategy.

    A strategy whose ``select`` always answers the same way for the same
    frame sets ``deterministic``; the driver then asks it once per
    connector instead of retrying.
    """

    deterministic: bool = False

    @abstractmethod
    def select(self, frame: Frame, from_section: Section, connector: Connector) -> Section | None:
        """Return a section carrying *connector*, or None at a dead end."""

    @abstractmethod
    def make_edge(
        self,
        from_connector: Connector,
        to_connector: Connector,
        from_point: Point,
        to_point: Point,
    ) -> Edge: ...

    @abstractmethod
    def push_frame(self, frame: Frame) -> None: ...

    @abstractmethod
    def pop_frame(self, frame: Frame) -> None: ...

    @abstractmethod
    def should_continue(self, frame: Frame) -> bool: ...

    @abstractmethod
    def on_solution(self, frame: Frame) -> None: ...


class BasicCallback(LinkStyle, GenerateCallback):
    """Solution budget and recording common to the built-in strategies.

    Parameters:
        dictionary: The library consulted for fresh sections.
        selection: Reuse and self-loop policy.
        max_solutions: Stop once more than this many solutions are
            recorded. Zero or less disables generation outright.
        continuation: Driver-supplied predicate; returning False stops.
        connect_existing: Driver-supplied per-frame reuse decision. When
            omitted, ``selection.reuse_open_connections`` decides.
        rng: Random source. Defaults to an unseeded generator.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        *,
        selection: SelectionConfig | None = None,
        max_solutions: int = 10,
        continuation: Continuation | None = None,
        connect_existing: Continuation | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        super().__init__()
        self.dictionary = dictionary
        self.selection = selection or SelectionConfig()
        self.max_solutions = max_solutions
        self.rng = rng if rng is not None else np.random.default_rng()
        self._continuation = continuation
        self._connect_existing = connect_existing
        self._num_solutions_found = 0

    @property
    def num_solutions(self) -> int:
        return self._num_solutions_found

    def reuse_open(self, frame: Frame) -> bool:
        """Whether ``select`` may attach to open sections of *frame*."""
        if self._connect_existing is None:
            return self.selection.reuse_open_connections
        return self._connect_existing(frame)

    def should_continue(self, frame: Frame) -> bool:
        if self.max_solutions <= 0 or self._num_solutions_found > self.max_solutions:
            return False
        if self._continuation is None:
            return True
        return self._continuation(frame)

    def on_solution(self, frame: Frame) -> None:
        self._num_solutions_found += 1
        self.record_solution(frame)
        logger.debug(
            "Solution %d: %d points, %d edges",
            self._num_solutions_found,
            len(frame.sections),
            len(frame.edges),
        )
