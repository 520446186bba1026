# certify/crypto/pem.py
from cryptography import x509
from cryptography.hazmat.primitives import serialization

from certify.crypto.keys import KeyPair


def encode_key(key_pair: KeyPair) -> str:
    """Unencrypted PKCS#1 ("BEGIN RSA PRIVATE KEY") PEM text."""
    return key_pair.private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


def encode_certificate(cert: x509.Certificate) -> str:
    return cert.public_bytes(serialization.Encoding.PEM).decode("ascii")
