import logging
from dataclasses import dataclass
from os import urandom

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .errors import DerivationFailure, RandomnessUnavailable

logger = logging.getLogger(__name__)

ALGORITHM = "argon2id"
VERSION = ARGON2_VERSION  # 0x13 == 19


@dataclass(frozen=True)
class Parameters:
    time: int
    memory: int
    threads: int
    length: int
    salt: bytes


def _positive(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def new_parameters(time: int, memory: int, threads: int, length: int,
                   salt_length: int | None = None) -> Parameters:
    """Build Parameters around a fresh random salt.

    The salt is ``length`` bytes long unless ``salt_length`` says otherwise.
    """
    _positive("time", time)
    _positive("memory", memory)
    _positive("threads", threads)
    _positive("length", length)
    n = length if salt_length is None else _positive("salt_length", salt_length)
    try:
        salt = urandom(n)
    except (OSError, NotImplementedError) as exc:
        logger.warning("random source failed while generating a %d byte salt", n)
        raise RandomnessUnavailable("argon2id: could not read random salt") from exc
    return Parameters(time=time, memory=memory, threads=threads,
                      length=length, salt=salt)


def password_bytes(password: bytes | str) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError(f"password must be bytes or str, not {type(password).__name__}")


def derive_key(password: bytes | str, params: Parameters) -> bytes:
    """Run Argon2id over ``password`` and return ``params.length`` raw bytes."""
    try:
        digest = hash_secret_raw(
            secret=password_bytes(password),
            salt=params.salt,
            time_cost=params.time,
            memory_cost=params.memory,
            parallelism=params.threads,
            hash_len=params.length,
            type=Type.ID,
            version=VERSION,
        )
    except (HashingError, OverflowError) as exc:
        logger.warning("argon2id derivation failed (m=%d, t=%d, p=%d, len=%d): %s",
                       params.memory, params.time, params.threads, params.length, exc)
        raise DerivationFailure(f"argon2id: derivation failed: {exc}") from exc
    logger.debug("derived argon2id digest (m=%d, t=%d, p=%d, len=%d)",
                 params.memory, params.time, params.threads, params.length)
    return digest
