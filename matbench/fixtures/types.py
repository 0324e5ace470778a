from matbench.config import ConfigError


class SizeFormatError(ConfigError):
    def __init__(self, token: str, reason: str):
        super().__init__(f"Incorrect size format '{token}': {reason}. Use e.g. 100x100.")
        self.token = token


class UnknownTaskKindError(ConfigError):
    def __init__(self, name: str):
        super().__init__(f"Unknown task: {name}")
        self.name = name
