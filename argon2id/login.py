import logging
import re
from dataclasses import replace

from cryptography.hazmat.primitives.constant_time import bytes_eq

from .config import Config, load_config
from .encoding import (b64decode_nopad, generate_from_password,
                       get_parameters_from_hash, split_hash)
from .errors import InvalidHash, InvalidVersion, PasswordMismatch
from .keys import ALGORITHM, VERSION, derive_key

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"v=([1-9][0-9]*)")


def _check_version(section: str) -> None:
    m = _VERSION_RE.fullmatch(section)
    if m is None:
        raise InvalidHash(f"argon2id: malformed version block {section!r}")
    if int(m.group(1)) != VERSION:
        raise InvalidVersion(f"argon2id: unsupported version {m.group(1)}")


def compare_hash_and_password(encoded: bytes | str, password: bytes | str) -> None:
    """Check ``password`` against an encoded argon2id hash.

    Returns None on a match. Raises PasswordMismatch when the password is
    wrong, and InvalidHash / InvalidVersion when the record itself is bad.
    """
    sections = split_hash(encoded)
    if sections[1] != ALGORITHM:
        raise InvalidVersion("argon2id: non argon2id hash provided")
    _check_version(sections[2])

    stored = b64decode_nopad(sections[5])
    if not stored:
        raise InvalidHash("argon2id: empty digest")

    params = get_parameters_from_hash(encoded)
    # the stored digest decides the output length, not the salt
    candidate = derive_key(password, replace(params, length=len(stored)))

    if not bytes_eq(stored, candidate):
        logger.debug("argon2id password mismatch")
        raise PasswordMismatch()


def hash_password(password: bytes | str, config: Config | None = None) -> str:
    config = config or load_config()
    return generate_from_password(password, config.new_parameters()).decode("ascii")


def verify_password(password: bytes | str, encoded: bytes | str) -> bool:
    """True if the password matches; malformed records still raise."""
    try:
        compare_hash_and_password(encoded, password)
    except PasswordMismatch:
        return False
    return True


def needs_rehash(encoded: bytes | str, config: Config | None = None) -> bool:
    """Whether a stored hash was made with a different cost profile than ``config``."""
    config = config or load_config()
    sections = split_hash(encoded)
    if sections[1] != ALGORITHM or sections[2] != "v=%d" % VERSION:
        return True
    params = get_parameters_from_hash(encoded)
    digest_len = len(b64decode_nopad(sections[5]))
    return (params.memory, params.time, params.threads, digest_len) != (
        config.memory, config.time, config.threads, config.length)
