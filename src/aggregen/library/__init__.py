"""Library layer: the immutable corpus of candidate sections."""

from aggregen.library.dictionary import Dictionary
from aggregen.library.loader import LexisError, load_lexis

__all__ = ["Dictionary", "LexisError", "load_lexis"]
