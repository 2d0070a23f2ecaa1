from __future__ import annotations

import hashlib

import pytest

import argon2id.keys
from argon2id import Parameters, new_parameters

REFERENCE_HASH = "$argon2id$v=19$m=65536,t=1,p=1$U0FMVA$kRmKhQ"
REFERENCE_DIGEST = bytes.fromhex("91198a85")


@pytest.fixture
def fast_params() -> Parameters:
    return new_parameters(1, 1024, 1, 16)


@pytest.fixture
def reference_params() -> Parameters:
    return Parameters(time=1, memory=64 * 1024, threads=1, length=4, salt=b"SALT")


@pytest.fixture
def reference_kdf(monkeypatch):
    """Stand in for libargon2, which rejects the 4-byte reference salt.

    Returns the published digest for ("argon", "SALT", t=1, m=65536, p=1)
    and a keyed blake2b value for anything else.
    """
    calls = []

    def fake(secret, salt, time_cost, memory_cost, parallelism, hash_len, type, version):
        calls.append(dict(secret=secret, salt=salt, time_cost=time_cost,
                          memory_cost=memory_cost, parallelism=parallelism,
                          hash_len=hash_len, version=version))
        if (secret, salt, time_cost, memory_cost, parallelism, hash_len) == (
                b"argon", b"SALT", 1, 65536, 1, 4):
            return REFERENCE_DIGEST
        return hashlib.blake2b(secret, key=salt, digest_size=hash_len).digest()

    monkeypatch.setattr(argon2id.keys, "hash_secret_raw", fake)
    return calls


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ("ARGON2ID_TIME", "ARGON2ID_MEMORY", "ARGON2ID_THREADS",
                 "ARGON2ID_LENGTH", "ARGON2ID_SALT_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    # no stray .env from the checkout
    monkeypatch.chdir(tmp_path)
    return monkeypatch
