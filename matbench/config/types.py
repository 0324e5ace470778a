from dataclasses import dataclass

DEFAULT_ENDPOINT = "http://localhost:3000"
DEFAULT_CATALOG = "tasks.json"


@dataclass
class Settings:
    endpoint: str = DEFAULT_ENDPOINT
    timeout_s: float | None = None
    catalog: str = DEFAULT_CATALOG
    seed: int | None = None


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
