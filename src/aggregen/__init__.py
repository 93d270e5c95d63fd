"""aggregen: randomized constraint-based graph assembly from weighted sections."""

__version__ = "0.1.0"
