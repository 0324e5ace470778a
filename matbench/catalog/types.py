from dataclasses import dataclass, field

Matrix = list[list[int]]

MATRIX_MULTIPLICATION = "matrix_multiplication"


@dataclass(frozen=True)
class Task:
    name: str
    matrix_a: Matrix
    matrix_b: Matrix

    @property
    def operands(self) -> tuple[Matrix, Matrix]:
        return (self.matrix_a, self.matrix_b)

    def to_payload(self) -> dict:
        return {
            "taskName": self.name,
            "matrixA": self.matrix_a,
            "matrixB": self.matrix_b,
        }


@dataclass
class TaskCatalog:
    tasks: list[Task] = field(default_factory=list)

    def __iter__(self):
        yield from self.tasks

    def __len__(self):
        return len(self.tasks)

    def append(self, task: Task) -> None:
        self.tasks.append(task)

    def to_document(self) -> dict:
        return {"tasks": [task.to_payload() for task in self.tasks]}


class CatalogError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
