from dataclasses import dataclass
from enum import Enum

from matbench.catalog import Matrix


class VerdictStatus(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNKNOWN_KIND = "unknown_kind"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ResultEntry:
    task_name: str
    matrix_a: Matrix
    matrix_b: Matrix
    claimed_result: Matrix

    @property
    def operands(self) -> tuple[Matrix, Matrix]:
        return (self.matrix_a, self.matrix_b)


@dataclass(frozen=True)
class Verdict:
    index: int
    task_name: str | None
    status: VerdictStatus
    detail: str = ""


class ResultsFileError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class ResultDecodeError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
