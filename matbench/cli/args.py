from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="matbench")

    parser.add_argument(
        "--config",
        default=None,
        help="Path to harness config file (default: matbench.yml if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request timings and catalog writes",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Send every catalog task to the server")
    run.add_argument("--catalog", help="Path to the task catalog")
    run.add_argument("--endpoint", help="URL of the server under test")
    run.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds (default: wait indefinitely)",
    )

    # verify
    verify = subparsers.add_parser(
        "verify", help="Check a server results file against recomputed products"
    )
    verify.add_argument("results", help="Path to the results file")

    # add
    add = subparsers.add_parser("add", help="Append a generated task to the catalog")
    add.add_argument("task_name", help="Task kind, e.g. matrix_multiplication")
    add.add_argument("size", help="Size token RxC, e.g. 100x100")
    add.add_argument("--catalog", help="Path to the task catalog")
    add.add_argument("--seed", type=int, help="Seed for reproducible fixtures")

    return parser
