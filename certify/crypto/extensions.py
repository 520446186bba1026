# certify/crypto/extensions.py
"""
X.509v3 extensions for a self-signed host certificate.

The set is built in a fixed order:
  SubjectKeyIdentifier, AuthorityKeyIdentifier, SubjectAlternativeName
  (only with names), BasicConstraints, KeyUsage, ExtendedKeyUsage (not for CA).
The role decides BasicConstraints, KeyUsage and ExtendedKeyUsage.
"""
from typing import Iterable, List, NamedTuple

from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import ExtendedKeyUsageOID, ObjectIdentifier

from certify.common.config import Role
from certify.common.utils import unique_names


class ExtensionRecord(NamedTuple):
    oid: ObjectIdentifier
    critical: bool
    value: x509.ExtensionType


def _key_usage(role: Role) -> x509.KeyUsage:
    is_ca = role is Role.CA
    return x509.KeyUsage(
        digital_signature=True,
        content_commitment=is_ca,
        key_encipherment=not is_ca,
        data_encipherment=False,
        key_agreement=False,
        key_cert_sign=is_ca,
        crl_sign=is_ca,
        encipher_only=False,
        decipher_only=False,
    )


def build_extensions(subject_public_key: rsa.RSAPublicKey,
                     issuer_public_key: rsa.RSAPublicKey,
                     alt_names: Iterable[str],
                     role: Role) -> List[ExtensionRecord]:
    values = [
        (x509.SubjectKeyIdentifier.from_public_key(subject_public_key), False),
        (x509.AuthorityKeyIdentifier.from_issuer_public_key(issuer_public_key), False),
    ]
    names = unique_names(alt_names)
    if names:
        values.append((x509.SubjectAlternativeName([x509.DNSName(n) for n in names]), False))

    if role is Role.CA:
        values.append((x509.BasicConstraints(ca=True, path_length=None), True))
    else:
        values.append((x509.BasicConstraints(ca=False, path_length=None), True))
    values.append((_key_usage(role), True))

    if role is Role.SERVER:
        values.append((x509.ExtendedKeyUsage([ExtendedKeyUsageOID.SERVER_AUTH]), True))
    elif role is Role.CLIENT:
        values.append((x509.ExtendedKeyUsage([ExtendedKeyUsageOID.CLIENT_AUTH]), True))

    records = []
    seen = set()
    for value, critical in values:
        if value.oid in seen:
            raise ValueError(f"duplicate extension {value.oid.dotted_string}")
        seen.add(value.oid)
        records.append(ExtensionRecord(value.oid, critical, value))
    return records
