# certify/crypto/request.py
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.x509.oid import NameOID

from certify.crypto.keys import KeyPair


def subject_name(common_name: str) -> x509.Name:
    return x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])


def create_request(common_name: str, key_pair: KeyPair) -> x509.CertificateSigningRequest:
    """
    PKCS#10 request binding common_name to the key pair's public key.
    Extensions are not part of the request; they are added at signing time.
    """
    return (
        x509.CertificateSigningRequestBuilder()
        .subject_name(subject_name(common_name))
        .sign(key_pair.private_key, hashes.SHA256())
    )
