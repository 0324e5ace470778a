from __future__ import annotations

import sys
from typing import Iterable, TextIO

from matbench.catalog import Task
from matbench.dispatch import DispatchFailure, RunResult, TaskOutcome
from matbench.verify import Verdict, VerdictStatus

_VERDICT_TEXT = {
    VerdictStatus.CORRECT: "the result of matrix multiplication is correct",
    VerdictStatus.INCORRECT: "ERROR - the result of multiplication is incorrect",
    VerdictStatus.UNKNOWN_KIND: "unknown task kind",
    VerdictStatus.MALFORMED: "ERROR - malformed entry",
}


def print_run(rr: RunResult, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    items: list[TaskOutcome | DispatchFailure] = [*rr.outcomes, *rr.failed]

    for item in sorted(items, key=lambda it: it.index):
        if isinstance(item, TaskOutcome):
            prefix = "OK" if item.ok else "HTTP-ERROR"
            print(
                f"{prefix} {item.task_name}, {item.elapsed_ms} ms, status = {item.server_status}",
                file=out,
            )
        else:
            print(f"FAIL {item.task_name}, transport error: {item.error}", file=out)


def print_verdicts(verdicts: Iterable[Verdict], out: TextIO | None = None) -> None:
    out = out or sys.stdout
    for verdict in verdicts:
        label = f"Entry #{verdict.index}"
        if verdict.task_name is not None:
            label += f" ({verdict.task_name})"

        line = f"{label}: {_VERDICT_TEXT[verdict.status]}"
        if verdict.detail:
            line += f": {verdict.detail}"
        print(line, file=out)


def print_added(
    task: Task, size: tuple[int, int], out: TextIO | None = None
) -> None:
    out = out or sys.stdout
    rows, cols = size
    print(
        f"Added task '{task.name}' with matrices of dimensions [{rows}x{cols}] and [{cols}x{rows}]",
        file=out,
    )
