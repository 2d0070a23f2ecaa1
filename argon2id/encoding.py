"""Encoding of argon2id hashes into the PHC-style text record.

A record looks like::

    $argon2id$v=19$m=65536,t=1,p=1$U0FMVA$kRmKhQ

The salt and digest use the standard base64 alphabet with the ``=``
padding stripped.
"""
import base64
import binascii
import re

from .errors import InvalidEncoding, InvalidHash
from .keys import ALGORITHM, VERSION, Parameters, derive_key

SEP = "$"
SEGMENTS = 6
# positive decimals, no leading zeros
_PARAMS_RE = re.compile(r"m=([1-9][0-9]*),t=([1-9][0-9]*),p=([1-9][0-9]*)")


def b64encode_nopad(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode_nopad(text: str) -> bytes:
    """Decode unpadded base64, rejecting anything that would not re-encode identically."""
    if len(text) % 4 == 1:
        raise InvalidEncoding(f"argon2id: bad base64 length ({len(text)})")
    try:
        raw = base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding("argon2id: malformed base64") from exc
    if b64encode_nopad(raw) != text:
        raise InvalidEncoding("argon2id: non-canonical base64")
    return raw


def split_hash(encoded: bytes | str) -> list[str]:
    if isinstance(encoded, (bytes, bytearray)):
        try:
            encoded = bytes(encoded).decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidHash("argon2id: hash is not ASCII text") from exc
    sections = encoded.split(SEP)
    if len(sections) != SEGMENTS:
        raise InvalidHash("argon2id: invalid hash provided")
    return sections


def generate_from_password(password: bytes | str, params: Parameters) -> bytes:
    """Hash ``password`` with ``params`` and return the encoded record.

    libargon2 refuses salts shorter than 8 bytes and digests shorter than
    4 bytes; such parameters raise DerivationFailure. This includes the
    4-byte "SALT" test vector and any ``salt_length`` below 8.
    """
    digest = derive_key(password, params)
    out = "$%s$v=%d$m=%d,t=%d,p=%d$%s$%s" % (
        ALGORITHM, VERSION,
        params.memory, params.time, params.threads,
        b64encode_nopad(params.salt), b64encode_nopad(digest))
    return out.encode("ascii")


def get_parameters_from_hash(encoded: bytes | str) -> Parameters:
    """Read the cost settings and salt back out of an encoded record.

    ``length`` is taken from the salt, matching how new_parameters sizes it.
    """
    sections = split_hash(encoded)
    m = _PARAMS_RE.fullmatch(sections[3])
    if m is None:
        raise InvalidHash(f"argon2id: malformed parameter block {sections[3]!r}")
    memory, time, threads = (int(g) for g in m.groups())
    salt = b64decode_nopad(sections[4])
    if not salt:
        raise InvalidHash("argon2id: empty salt")
    return Parameters(time=time, memory=memory, threads=threads,
                      length=len(salt), salt=salt)
