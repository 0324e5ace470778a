import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Mapping

from .types import CatalogError, Matrix, Task, TaskCatalog

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path, *, missing_ok: bool = False) -> TaskCatalog:
    """Read the whole catalog into memory.

    With ``missing_ok`` a nonexistent or empty file is an empty catalog.
    """
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        if missing_ok:
            return TaskCatalog()
        raise CatalogError(f"Catalog file not found: {pure_path}")

    if not pure_path.is_file():
        raise CatalogError(f"Catalog path is not a file: {pure_path}")

    try:
        text = pure_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"{pure_path}: cannot read catalog: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise CatalogError(f"{pure_path}: catalog file is not valid UTF-8") from exc

    if len(text.strip()) < 1:
        if missing_ok:
            return TaskCatalog()
        raise CatalogError(f"{pure_path}: catalog file is empty")

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"{pure_path}: invalid JSON") from exc

    return _build_catalog(pure_path, raw)


def save_catalog(path: str | Path, catalog: TaskCatalog) -> None:
    """Rewrite the whole catalog.

    The document goes to a sibling temp file first and is then renamed over
    the target. There is no lock: two concurrent writers can lose an update.
    """
    pure_path = Path(path).expanduser().resolve()
    data = json.dumps(catalog.to_document(), indent=2) + "\n"

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{pure_path.name}.", suffix=".tmp", dir=pure_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(data)
            os.chmod(tmp_name, _file_mode(pure_path))
            os.replace(tmp_name, pure_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise CatalogError(f"{pure_path}: cannot write catalog: {exc}") from exc

    logger.info("Wrote %d task(s) to %s", len(catalog), pure_path)


def _file_mode(path: Path) -> int:
    # mkstemp creates 0600; keep the existing mode, or what open() would give.
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def append_task(path: str | Path, task: Task) -> TaskCatalog:
    catalog = load_catalog(path, missing_ok=True)
    catalog.append(task)
    save_catalog(path, catalog)
    return catalog


def _build_catalog(path: Path, raw: Any) -> TaskCatalog:
    if not isinstance(raw, Mapping):
        raise CatalogError(
            f"{path}: JSON parsed successfully but top-level value is not an object: {type(raw)}"
        )

    if not "tasks" in raw:
        raise CatalogError(f"{path}: Missing 'tasks' field")

    # A catalog written by an older tool may carry null for an empty list.
    if raw["tasks"] is None:
        return TaskCatalog()

    if not isinstance(raw["tasks"], list):
        raise CatalogError(f"{path}: 'tasks' must be a list, got {type(raw['tasks'])}")

    catalog = TaskCatalog()
    for index, fields in enumerate(raw["tasks"]):
        catalog.append(_build_task(path, index, fields))

    return catalog


def _build_task(path: Path, index: int, fields: Any) -> Task:
    where = f"{path}: task #{index}"

    if not isinstance(fields, Mapping):
        raise CatalogError(f"{where} must be an object")

    for key in ("taskName", "matrixA", "matrixB"):
        if key not in fields:
            raise CatalogError(f"{where}: missing '{key}'")

    name = fields["taskName"]
    if not isinstance(name, str):
        raise CatalogError(f"{where}: taskName should be a string")

    where = f"{path}: task #{index} ({name})"
    matrix_a = _build_matrix(where, "matrixA", fields["matrixA"])
    matrix_b = _build_matrix(where, "matrixB", fields["matrixB"])

    return Task(name, matrix_a, matrix_b)


def _build_matrix(where: str, field: str, raw: Any) -> Matrix:
    if raw is None:
        return []

    if not isinstance(raw, list):
        raise CatalogError(f"{where}: {field} should be a list of rows")

    matrix: Matrix = []
    for row in raw:
        if not isinstance(row, list):
            raise CatalogError(f"{where}: every row of {field} should be a list")

        for cell in row:
            if isinstance(cell, bool) or not isinstance(cell, int):
                raise CatalogError(f"{where}: {field} holds a non-integer value {cell!r}")

        if matrix and len(row) != len(matrix[0]):
            raise CatalogError(f"{where}: rows of {field} have different lengths")

        matrix.append(list(row))

    return matrix
