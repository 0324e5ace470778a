import json
import math
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import ConfigError, Settings, UnsupportedConfigFormatError

DEFAULT_CONFIG = "matbench.yml"


def load_settings(path: str | Path | None = None) -> Settings:
    """Load harness settings.

    With no path, ``matbench.yml`` in the working directory is used if it
    exists and the built-in defaults otherwise. An explicit path must exist.
    """
    if path is None:
        default = Path(DEFAULT_CONFIG)
        if not default.is_file():
            return Settings()
        path = default

    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_settings(pure_path, raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    match fmt:
        case "yaml":
            return _parse_yaml(path)
        case "toml":
            return _parse_toml(path)
        case "json":
            return _parse_json(path)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: invalid YAML") from exc

    # An empty YAML document means "all defaults".
    if raw_file is None:
        return {}

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: YAML parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _parse_toml(path: Path) -> Mapping[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: invalid TOML") from exc


def _parse_json(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: invalid JSON") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: JSON parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_settings(path: Path, raw: Mapping[str, Any]) -> Settings:
    keys = {"endpoint", "timeout", "catalog", "seed"}
    settings = Settings()

    for field in raw.keys():
        if field not in keys:
            raise ConfigError(f"{path}: Can't process: {field}")

    if "endpoint" in raw:
        settings.endpoint = _non_empty_str(path, "endpoint", raw["endpoint"])

    if "catalog" in raw:
        settings.catalog = _non_empty_str(path, "catalog", raw["catalog"])

    if "timeout" in raw:
        settings.timeout_s = parse_timeout(raw["timeout"], where=str(path))

    if "seed" in raw:
        seed = raw["seed"]
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise ConfigError(f"{path}: seed should be a non-negative integer")
        settings.seed = seed

    return settings


def _non_empty_str(path: Path, name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{path}: {name} should be a string")

    if len(value.strip()) < 1:
        raise ConfigError(f"{path}: {name} can't be empty")

    return value.strip()


def parse_timeout(value: Any, *, where: str = "timeout") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{where}: timeout should be a number of seconds")

    if not math.isfinite(value):
        raise ConfigError(f"{where}: timeout must be a finite number, got {value}")

    if value <= 0:
        raise ConfigError(f"{where}: timeout must be positive, got {value}")

    return float(value)
