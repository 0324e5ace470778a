from .store import append_task, load_catalog, save_catalog
from .types import MATRIX_MULTIPLICATION, CatalogError, Matrix, Task, TaskCatalog

__all__ = [
    "append_task",
    "load_catalog",
    "save_catalog",
    "CatalogError",
    "Matrix",
    "MATRIX_MULTIPLICATION",
    "Task",
    "TaskCatalog",
]
