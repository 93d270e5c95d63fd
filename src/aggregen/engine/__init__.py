"""Selection engine: samplers, frame caches and assembly strategies."""

from aggregen.engine.callback import BasicCallback, GenerateCallback
from aggregen.engine.first_fit import FirstFitCallback
from aggregen.engine.frames import FrameProtocolError, FrameStack, OpenSelection
from aggregen.engine.random_callback import RandomCallback
from aggregen.engine.sampling import DistributionCache, Sampler
from aggregen.engine.solutions import LinkStyle, Solution

__all__ = [
    "BasicCallback",
    "DistributionCache",
    "FirstFitCallback",
    "FrameProtocolError",
    "FrameStack",
    "GenerateCallback",
    "LinkStyle",
    "OpenSelection",
    "RandomCallback",
    "Sampler",
    "Solution",
]
