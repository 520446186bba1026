# certify/crypto/sign.py
"""
Self-signing of a certificate request.
Provides:
 - keys_match(private_key, public_key) -> bool
 - sign_certificate(request, issuer_key, validity, extensions) -> x509.Certificate

Certificates are signed with RSA PKCS#1 v1.5 + SHA256. Serial numbers come
from x509.random_serial_number() (random positive integer below 2**159).
"""
import logging
from typing import Iterable

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import rsa

from certify.common.errors import KeyMismatchError, SigningError
from certify.crypto.extensions import ExtensionRecord
from certify.crypto.keys import KeyPair
from certify.crypto.validity import Validity

log = logging.getLogger(__name__)


def keys_match(private_key: rsa.RSAPrivateKey, public_key) -> bool:
    """
    True if public_key is exactly the public half of private_key.
    """
    if not isinstance(public_key, rsa.RSAPublicKey):
        return False
    return private_key.public_key().public_numbers() == public_key.public_numbers()


def sign_certificate(request: x509.CertificateSigningRequest,
                     issuer_key: KeyPair,
                     validity: Validity,
                     extensions: Iterable[ExtensionRecord]) -> x509.Certificate:
    public_key = request.public_key()
    if not keys_match(issuer_key.private_key, public_key):
        raise KeyMismatchError("public/private keys don't match")

    serial = x509.random_serial_number()
    builder = (
        x509.CertificateBuilder()
        .subject_name(request.subject)
        .issuer_name(request.subject)
        .public_key(public_key)
        .serial_number(serial)
        .not_valid_before(validity.not_before)
        .not_valid_after(validity.not_after)
    )
    try:
        for ext in extensions:
            builder = builder.add_extension(ext.value, critical=ext.critical)
        cert = builder.sign(private_key=issuer_key.private_key, algorithm=hashes.SHA256())
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise SigningError(f"signing failed: {e}") from e

    log.debug("signed certificate serial=%x", serial)
    return cert
