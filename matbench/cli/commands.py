from __future__ import annotations

import argparse
import logging
import sys

import requests

from matbench.catalog import CatalogError, append_task, load_catalog
from matbench.config import ConfigError, Settings, load_settings
from matbench.config.loader import parse_timeout
from matbench.dispatch import Dispatcher
from matbench.fixtures import build_task, make_rng, parse_size
from matbench.report import print_added, print_run, print_verdicts
from matbench.verify import ResultsFileError, check_results, load_results

from .args import build_parser


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)

        match args.command:
            case "run":
                return cmd_run(args)
            case "verify":
                return cmd_verify(args)
            case "add":
                return cmd_add(args)
            case _:
                return 2

    except (ConfigError, CatalogError, ResultsFileError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_run(args: argparse.Namespace) -> int:
    settings = _settings_with(args)
    catalog = load_catalog(settings.catalog)

    with requests.Session() as session:
        dispatcher = Dispatcher(
            settings.endpoint, timeout_s=settings.timeout_s, session=session
        )
        rr = dispatcher.run_all(catalog)

    print_run(rr)
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    entries = load_results(args.results)
    print_verdicts(check_results(entries))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    settings = _settings_with(args)
    rng = make_rng(settings.seed)
    task = build_task(args.task_name, args.size, rng)
    append_task(settings.catalog, task)
    print_added(task, parse_size(args.size))
    return 0


def _settings_with(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)

    if getattr(args, "catalog", None):
        settings.catalog = args.catalog
    if getattr(args, "endpoint", None):
        settings.endpoint = args.endpoint
    if getattr(args, "timeout", None) is not None:
        settings.timeout_s = parse_timeout(args.timeout, where="--timeout")
    if getattr(args, "seed", None) is not None:
        if args.seed < 0:
            raise ConfigError(f"--seed must be non-negative, got {args.seed}")
        settings.seed = args.seed

    return settings


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
