import json
import logging
import time

import requests

from matbench.catalog import Task, TaskCatalog

from .types import DispatchError, DispatchFailure, RunResult, TaskOutcome

logger = logging.getLogger(__name__)


class Dispatcher:
    """Sends catalog tasks to the service under test one at a time.

    ``timeout_s`` of None leaves the request without a deadline.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout_s: float | None = None,
        session: requests.Session | None = None,
    ):
        self.endpoint = endpoint
        self.timeout_s = timeout_s
        self.session = session if session is not None else requests.Session()

    def dispatch(self, task: Task, index: int = 0) -> TaskOutcome:
        try:
            payload = json.dumps(task.to_payload())
        except (TypeError, ValueError) as exc:
            raise DispatchError(task.name, f"cannot serialize task: {exc}") from exc

        start = time.monotonic()
        try:
            # stream=True returns as soon as the headers are in.
            response = self.session.post(
                self.endpoint,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout_s,
                stream=True,
            )
        except requests.RequestException as exc:
            raise DispatchError(task.name, str(exc)) from exc
        elapsed_ms = int((time.monotonic() - start) * 1000)

        with response:
            status = f"{response.status_code} {response.reason or ''}".rstrip()

        logger.debug("%s -> %s in %d ms", task.name, status, elapsed_ms)
        return TaskOutcome(index, task.name, elapsed_ms, status, response.status_code)

    def run_all(self, catalog: TaskCatalog) -> RunResult:
        outcomes: list[TaskOutcome] = []
        failed: list[DispatchFailure] = []

        for index, task in enumerate(catalog):
            try:
                outcomes.append(self.dispatch(task, index))
            except DispatchError as exc:
                logger.warning("Dispatch of task #%d failed: %s", index, exc)
                failed.append(DispatchFailure(index, task.name, exc.reason))

        return RunResult(outcomes, failed)
