from .printer import print_added, print_run, print_verdicts

__all__ = ["print_added", "print_run", "print_verdicts"]
