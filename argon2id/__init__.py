"""argon2id package: password hashing and verification with self-describing $argon2id$ records."""
from .config import Config, load_config
from .encoding import generate_from_password, get_parameters_from_hash
from .errors import (Argon2idError, DerivationFailure, InvalidEncoding, InvalidHash,
                     InvalidVersion, PasswordMismatch, RandomnessUnavailable)
from .keys import Parameters, new_parameters
from .login import compare_hash_and_password, hash_password, needs_rehash, verify_password

__all__ = [
    "Argon2idError", "Config", "DerivationFailure", "InvalidEncoding", "InvalidHash",
    "InvalidVersion", "Parameters", "PasswordMismatch", "RandomnessUnavailable",
    "compare_hash_and_password", "generate_from_password", "get_parameters_from_hash",
    "hash_password", "load_config", "needs_rehash", "new_parameters", "verify_password",
]
