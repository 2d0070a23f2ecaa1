"""Exceptions raised while hashing and verifying passwords."""


class Argon2idError(Exception):
    """Base class for every error raised by this package."""


class InvalidHash(Argon2idError, ValueError):
    """The encoded hash does not follow the $argon2id$ record layout."""


class InvalidEncoding(InvalidHash):
    """A salt or digest segment is not valid unpadded base64."""


class InvalidVersion(Argon2idError, ValueError):
    """The record is well formed but not an argon2id (v=19) hash."""


class PasswordMismatch(Argon2idError):
    """The password does not match the encoded hash."""

    def __init__(self):
        super().__init__("argon2id: password did not match")


class RandomnessUnavailable(Argon2idError):
    """The operating system could not supply random bytes for a salt."""


class DerivationFailure(Argon2idError):
    """The Argon2id primitive refused to run with the given parameters."""
