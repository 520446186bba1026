# certify/crypto/pki.py

from typing import List, Tuple

from cryptography import x509
from cryptography.hazmat.primitives import serialization, hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.x509.oid import NameOID

from certify.storage.pemfile import read_pem_file


def load_cert(pem_bytes: bytes) -> x509.Certificate:
    """Load a PEM-encoded certificate and return an x509.Certificate object."""
    return x509.load_pem_x509_certificate(pem_bytes)


def load_bundle(path: str) -> Tuple[object, x509.Certificate]:
    """Load the (private key, certificate) pair from a file written by certify."""
    key_pem, cert_pem = read_pem_file(path)
    key = serialization.load_pem_private_key(key_pem.encode("ascii"), password=None)
    return key, load_cert(cert_pem.encode("ascii"))


def common_name(cert: x509.Certificate) -> str:
    """Return the subject Common Name (CN). Raises ValueError if missing."""
    attrs = cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if not attrs:
        raise ValueError("certificate has no Common Name (CN)")
    return attrs[0].value


def dns_names(cert: x509.Certificate) -> List[str]:
    """DNS names from the SubjectAlternativeName extension, [] when absent."""
    try:
        san = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName)
    except x509.ExtensionNotFound:
        return []
    return san.value.get_values_for_type(x509.DNSName)


def verify_self_signed(cert: x509.Certificate) -> None:
    """
    Verify that `cert` is self-signed: issuer equals subject and the
    signature verifies against the embedded public key.

    Raises:
      - ValueError if issuer does not match subject
      - InvalidSignature (propagated) if verification fails
    """
    if cert.issuer != cert.subject:
        raise ValueError("certificate issuer does not match subject")
    cert.public_key().verify(
        cert.signature,
        cert.tbs_certificate_bytes,
        padding.PKCS1v15(),
        cert.signature_hash_algorithm,
    )


def cert_fingerprint_hex(cert: x509.Certificate) -> str:
    """Return the SHA-256 fingerprint of the certificate as a hex string."""
    return cert.fingerprint(hashes.SHA256()).hex()
