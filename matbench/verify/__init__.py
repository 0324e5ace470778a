from .matrix import multiply, shape, verify
from .results import check_results, decode_entry, load_results
from .types import (
    ResultDecodeError,
    ResultEntry,
    ResultsFileError,
    Verdict,
    VerdictStatus,
)

__all__ = [
    "check_results",
    "decode_entry",
    "load_results",
    "multiply",
    "shape",
    "verify",
    "ResultDecodeError",
    "ResultEntry",
    "ResultsFileError",
    "Verdict",
    "VerdictStatus",
]
