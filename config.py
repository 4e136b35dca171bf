import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GeneratorConfig:
    __slots__ = ("default_count", "max_count")

    def __init__(self, default_count=1, max_count=1000):
        if not 1 <= default_count <= max_count:
            raise ValueError(f"default_count must be between 1 and max_count ({max_count})")
        self.default_count = default_count
        self.max_count = max_count


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("generator", "server", "logging")

    def __init__(self, generator=None, server=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
