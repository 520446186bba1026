# certify/crypto/keys.py
"""
RSA key acquisition using cryptography.
Provides:
 - KeyPair            private key plus the public key derived from it
 - generate(bits)     fresh key, requires rng.initialize()
 - load(path)         PEM-encoded RSA private key from disk
 - acquire(source)    resolves a GenerateKey / LoadKey config entry
"""
import logging
from dataclasses import dataclass, field
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from certify.common.config import GenerateKey, LoadKey
from certify.common.errors import DecodeError, KeyGenerationError, StorageError
from certify.crypto import rng

log = logging.getLogger(__name__)

PUBLIC_EXPONENT = 65537


@dataclass(frozen=True)
class KeyPair:
    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "public_key", self.private_key.public_key())

    @property
    def bits(self) -> int:
        return self.private_key.key_size


def generate(bits: int) -> KeyPair:
    rng.require()
    try:
        key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=bits)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyGenerationError(f"cannot generate {bits}-bit RSA key: {e}") from e
    log.debug("generated %d-bit RSA key", bits)
    return KeyPair(key)


def load(path: str) -> KeyPair:
    """
    Read the whole file at path and decode it as an unencrypted PEM RSA
    private key (PKCS#1 or PKCS#8).
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise StorageError(f"cannot read key file {path}: {e}") from e

    try:
        key = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise DecodeError(f"{path} is not a PEM private key: {e}") from e
    if not isinstance(key, rsa.RSAPrivateKey):
        raise DecodeError(f"{path} does not hold an RSA private key")
    log.debug("loaded %d-bit RSA key from %s", key.key_size, path)
    return KeyPair(key)


def acquire(source: Union[GenerateKey, LoadKey]) -> KeyPair:
    if isinstance(source, LoadKey):
        return load(source.path)
    return generate(source.bits)
