import os
from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike
from pathlib import Path
from tomllib import load

from pydantic import BaseModel, field_validator

DEFAULT_CONFIG_PATH = Path("config.toml")
ENCRYPTION_KEY_ENV = "ENCRYPTION_KEY"


class General(BaseModel):
    title: str


class Logging(BaseModel):
    level: int = INFO

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(value.upper(), INFO)


class Paths(BaseModel):
    logs: str


class Encryption(BaseModel):
    key: str = ""  # shared AES key, 16/24/32 bytes once UTF-8 encoded


class Cache(BaseModel):
    enabled: bool = False
    url: str = "redis://localhost:6379/0"


class Network(BaseModel):
    host: str
    port: int
    reload: bool


class Config(BaseModel):
    general: General
    paths: Paths
    logging: Logging
    encryption: Encryption
    network: Network
    cache: Cache = Cache()


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files.

    The shared key can be supplied out of band through the
    ``ENCRYPTION_KEY`` environment variable, which wins over the files.
    """
    # Load shared config
    with Path(shared_config_file).open("rb") as f:
        config_data = load(f)

    # Load and merge specific config if provided
    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            config_data.update(specific_data)

    env_key = os.environ.get(ENCRYPTION_KEY_ENV)
    if env_key:
        config_data.setdefault("encryption", {})["key"] = env_key

    return Config(**config_data)
