import numpy as np

from matbench.catalog import MATRIX_MULTIPLICATION, Matrix, Task

from .types import SizeFormatError, UnknownTaskKindError

# Entries are drawn from [LOW, HIGH).
LOW = 0
HIGH = 10


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Fresh OS entropy when ``seed`` is None, reproducible otherwise."""
    return np.random.default_rng(seed)


def generate(rows: int, cols: int, rng: np.random.Generator) -> Matrix:
    if rows < 0 or cols < 0:
        raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{cols}")

    if rows == 0:
        return []

    return rng.integers(LOW, HIGH, size=(rows, cols)).tolist()


def parse_size(token: str) -> tuple[int, int]:
    parts = token.strip().split("x")
    if len(parts) != 2:
        raise SizeFormatError(token, "expected <rows>x<cols>")

    dims = []
    for label, part in zip(("rows", "columns"), parts):
        if not (part.isascii() and part.isdigit()):
            raise SizeFormatError(token, f"{label} is not a non-negative integer")
        dims.append(int(part))

    return dims[0], dims[1]


def build_task(name: str, size: str, rng: np.random.Generator) -> Task:
    rows, cols = parse_size(size)

    match name:
        case "matrix_multiplication":
            # B is cols x rows so the product is square.
            matrix_a = generate(rows, cols, rng)
            matrix_b = generate(cols, rows, rng)
            return Task(MATRIX_MULTIPLICATION, matrix_a, matrix_b)
        case _:
            raise UnknownTaskKindError(name)
