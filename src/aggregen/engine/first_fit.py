"""FirstFitCallback: deterministic counterpart of the random strategy.

Always takes the first acceptable candidate: the earliest open section
carrying the connector, else the first library template. Useful as a
reproducible baseline and for debugging a lexis.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aggregen.engine.callback import BasicCallback
from aggregen.engine.frames import FrameProtocolError

if TYPE_CHECKING:
    from aggregen.domain.frame import Frame
    from aggregen.domain.types import Connector, Section


class FirstFitCallback(BasicCallback):
    """Deterministic strategy. See :class:`BasicCallback` for parameters."""

    deterministic = True

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._depth = 0

    def select(self, frame: Frame, from_section: Section, connector: Connector) -> Section | None:
        if self.reuse_open(frame):
            for sect in frame.exposing(connector):
                if self.selection.allow_self_loops or sect is not from_section:
                    return sect

        templates = self.dictionary.sections(connector)
        if not templates:
            return None
        return templates[0].materialize()

    def push_frame(self, frame: Frame) -> None:
        self._depth += 1

    def pop_frame(self, frame: Frame) -> None:
        if self._depth == 0:
            msg = "pop_frame called without a matching push_frame"
            raise FrameProtocolError(msg)
        self._depth -= 1
