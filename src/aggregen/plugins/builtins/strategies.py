"""Built-in plugin registering the shipped assembly strategies."""

from __future__ import annotations

from aggregen.engine.callback import GenerateCallback
from aggregen.engine.first_fit import FirstFitCallback
from aggregen.engine.random_callback import RandomCallback
from aggregen.plugins.hookspecs import hookimpl


class BuiltinStrategiesPlugin:
    @hookimpl
    def register_strategies(self) -> dict[str, type[GenerateCallback]]:
        return {"random": RandomCallback, "first-fit": FirstFitCallback}
