from .dispatcher import Dispatcher
from .types import DispatchError, DispatchFailure, RunResult, TaskOutcome

__all__ = ["Dispatcher", "DispatchError", "DispatchFailure", "RunResult", "TaskOutcome"]
