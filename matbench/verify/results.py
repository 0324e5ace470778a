import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from matbench.catalog import MATRIX_MULTIPLICATION, Matrix

from .matrix import verify
from .types import (
    ResultDecodeError,
    ResultEntry,
    ResultsFileError,
    Verdict,
    VerdictStatus,
)


def load_results(path: str | Path) -> list[Any]:
    """Read a results file written by the server under test.

    Only the top level is checked here; entries are decoded one by one so
    a bad entry does not hide the others.
    """
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ResultsFileError(f"Results file not found: {pure_path}")

    if not pure_path.is_file():
        raise ResultsFileError(f"Results path is not a file: {pure_path}")

    try:
        raw = json.loads(pure_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ResultsFileError(f"{pure_path}: cannot read results: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ResultsFileError(f"{pure_path}: results file is not valid UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise ResultsFileError(f"{pure_path}: invalid JSON") from exc

    if not isinstance(raw, list):
        raise ResultsFileError(
            f"{pure_path}: JSON parsed successfully but top-level value is not a list: {type(raw)}"
        )

    return raw


def decode_entry(raw: Any) -> ResultEntry:
    if not isinstance(raw, Mapping):
        raise ResultDecodeError(f"entry must be an object, got {type(raw).__name__}")

    task_name = raw.get("taskName")
    if not isinstance(task_name, str):
        raise ResultDecodeError("taskName should be a string")

    return ResultEntry(
        task_name=task_name,
        matrix_a=_decode_matrix("matrixA", raw),
        matrix_b=_decode_matrix("matrixB", raw),
        claimed_result=_decode_matrix("result", raw),
    )


def _decode_matrix(field: str, raw: Mapping[str, Any]) -> Matrix:
    if field not in raw:
        raise ResultDecodeError(f"missing '{field}'")

    value = raw[field]
    if not isinstance(value, list):
        raise ResultDecodeError(f"{field} should be a list of rows")

    matrix: Matrix = []
    for i, row in enumerate(value):
        if not isinstance(row, list):
            raise ResultDecodeError(f"{field}[{i}] should be a list")
        matrix.append([_decode_cell(f"{field}[{i}][{j}]", cell) for j, cell in enumerate(row)])

    return matrix


def _decode_cell(where: str, cell: Any) -> int:
    # JSON writers may emit 6.0 for 6; anything non-integral is rejected.
    if isinstance(cell, bool):
        raise ResultDecodeError(f"{where} is a boolean, expected an integer")
    if isinstance(cell, int):
        return cell
    if isinstance(cell, float) and cell.is_integer():
        return int(cell)
    raise ResultDecodeError(f"{where} is not an integer: {cell!r}")


def check_results(raw_entries: Iterable[Any]) -> list[Verdict]:
    verdicts: list[Verdict] = []

    for index, raw in enumerate(raw_entries):
        task_name = raw.get("taskName") if isinstance(raw, Mapping) else None
        if not isinstance(task_name, str):
            task_name = None

        if task_name is not None and task_name != MATRIX_MULTIPLICATION:
            verdicts.append(Verdict(index, task_name, VerdictStatus.UNKNOWN_KIND))
            continue

        try:
            entry = decode_entry(raw)
        except ResultDecodeError as exc:
            verdicts.append(Verdict(index, task_name, VerdictStatus.MALFORMED, str(exc)))
            continue

        if verify(*entry.operands, entry.claimed_result):
            verdicts.append(Verdict(index, task_name, VerdictStatus.CORRECT))
        else:
            verdicts.append(Verdict(index, task_name, VerdictStatus.INCORRECT))

    return verdicts
