"""Frame-scoped selection caches, kept as an arena indexed by depth.

Every search-tree level owns an :class:`OpenSelection`: the candidate
lists of open sections per connector, and the samplers built over them.
``push`` allocates a fresh level, ``pop`` discards the top one so the
parent's caches are live again. Nothing is shared between levels.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from aggregen.engine.sampling import DistributionCache

if TYPE_CHECKING:
    from aggregen.domain.types import Connector, Section


class FrameProtocolError(RuntimeError):
    """Raised when push/pop calls are not strictly nested."""


@dataclass
class OpenSelection:
    """Open-section candidates and samplers for one frame."""

    candidates: dict[Connector, list[Section]] = field(default_factory=dict)
    samplers: DistributionCache = field(default_factory=DistributionCache)


class FrameStack:
    """LIFO arena of :class:`OpenSelection` levels. Level 0 always exists."""

    def __init__(self) -> None:
        self._levels: list[OpenSelection] = [OpenSelection()]

    @property
    def current(self) -> OpenSelection:
        return self._levels[-1]

    @property
    def depth(self) -> int:
        return len(self._levels) - 1

    def push(self) -> OpenSelection:
        level = OpenSelection()
        self._levels.append(level)
        return level

    def pop(self) -> OpenSelection:
        """Discard the top level and resume its parent."""
        if len(self._levels) == 1:
            msg = "pop_frame called without a matching push_frame"
            raise FrameProtocolError(msg)
        self._levels.pop()
        return self.current
