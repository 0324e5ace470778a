from dataclasses import dataclass


@dataclass(frozen=True)
class TaskOutcome:
    index: int
    task_name: str
    elapsed_ms: int
    server_status: str
    status_code: int

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class DispatchFailure:
    index: int
    task_name: str
    error: str


@dataclass(frozen=True)
class RunResult:
    outcomes: list[TaskOutcome]
    failed: list[DispatchFailure]

    def __len__(self):
        return len(self.outcomes) + len(self.failed)


class DispatchError(Exception):
    def __init__(self, task_name: str, reason: str):
        super().__init__(f"{task_name}: {reason}")
        self.task_name = task_name
        self.reason = reason
