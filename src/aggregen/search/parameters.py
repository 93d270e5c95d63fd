"""Parameters: step budget, reuse policy and branch limits for the search driver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aggregen.config.models import SearchConfig, SelectionConfig
    from aggregen.domain.frame import Frame


class Parameters:
    """Limits consulted by :class:`~aggregen.search.aggregate.Aggregate`.

    ``step`` is the continuation predicate handed to callbacks: it stops
    the whole search once ``max_steps`` is spent. ``connect_existing`` is
    the per-frame reuse decision a callback asks before looking at open
    sections. ``prune`` only abandons the current branch.
    """

    def __init__(
        self,
        *,
        max_steps: int = 10000,
        max_depth: int = 50,
        max_network_size: int = 64,
        attempts: int = 3,
        reuse_open_connections: bool = True,
    ) -> None:
        self.max_steps = max_steps
        self.max_depth = max_depth
        self.max_network_size = max_network_size
        self.attempts = attempts
        self.reuse_open_connections = reuse_open_connections
        self._steps_taken = 0

    @classmethod
    def from_config(
        cls, search: SearchConfig, selection: SelectionConfig | None = None
    ) -> Parameters:
        reuse = selection.reuse_open_connections if selection is not None else True
        return cls(
            max_steps=search.max_steps,
            max_depth=search.max_depth,
            max_network_size=search.max_network_size,
            attempts=search.attempts,
            reuse_open_connections=reuse,
        )

    @property
    def steps_taken(self) -> int:
        return self._steps_taken

    def reset(self) -> None:
        """Start a fresh step count for a new run."""
        self._steps_taken = 0

    def step(self, frame: Frame) -> bool:
        self._steps_taken += 1
        return self._steps_taken <= self.max_steps

    def connect_existing(self, frame: Frame) -> bool:
        """Whether *frame*'s open sections may be tried before the library."""
        return self.reuse_open_connections
