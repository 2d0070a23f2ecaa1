import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import dotenv_values, find_dotenv

from .keys import Parameters, new_parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Default cost profile used by hash_password and needs_rehash."""
    time: int = 3
    memory: int = 64_000
    threads: int = 2
    length: int = 32
    salt_length: int = 16

    def new_parameters(self) -> Parameters:
        return new_parameters(self.time, self.memory, self.threads,
                              self.length, salt_length=self.salt_length)


def _env_int(env: Mapping[str, str | None], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 1:
        logger.warning("ignoring %s=%r: must be positive", name, raw)
        return default
    return value


def load_config(env_file: str | os.PathLike | None = None) -> Config:
    """Read ARGON2ID_* settings from the environment and a .env file.

    Without ``env_file`` a .env is looked up from the working directory.
    Real environment variables win over the file, and os.environ is left
    untouched.
    """
    path = env_file if env_file is not None else find_dotenv(usecwd=True)
    env = {**dotenv_values(path), **os.environ} if path else dict(os.environ)
    d = Config()
    return Config(
        time=_env_int(env, "ARGON2ID_TIME", d.time),
        memory=_env_int(env, "ARGON2ID_MEMORY", d.memory),
        threads=_env_int(env, "ARGON2ID_THREADS", d.threads),
        length=_env_int(env, "ARGON2ID_LENGTH", d.length),
        salt_length=_env_int(env, "ARGON2ID_SALT_LENGTH", d.salt_length),
    )
