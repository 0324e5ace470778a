from .generator import build_task, generate, make_rng, parse_size
from .types import SizeFormatError, UnknownTaskKindError

__all__ = [
    "build_task",
    "generate",
    "make_rng",
    "parse_size",
    "SizeFormatError",
    "UnknownTaskKindError",
]
