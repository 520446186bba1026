# certify/pipeline.py
"""
Issue one self-signed certificate and write key + certificate to a file.

    key -> signing request -> signed certificate -> PEM -> atomic write

Any failure raises a CertifyError subclass; nothing is retried.
"""
import logging
import datetime
from typing import Optional

from cryptography import x509

from certify.common.config import CertifyConfig
from certify.common.utils import utc_now
from certify.crypto import keys, pki
from certify.crypto.extensions import build_extensions
from certify.crypto.pem import encode_certificate, encode_key
from certify.crypto.request import create_request
from certify.crypto.sign import sign_certificate
from certify.crypto.validity import compute
from certify.storage.pemfile import write_pem_file

log = logging.getLogger(__name__)


def selfsign(config: CertifyConfig, now: Optional[datetime.datetime] = None) -> x509.Certificate:
    validity = compute(config.days, now if now is not None else utc_now())
    key_pair = keys.acquire(config.key_source)
    request = create_request(config.common_name, key_pair)
    extensions = build_extensions(
        key_pair.public_key, key_pair.public_key, config.alt_names, config.role)
    cert = sign_certificate(request, key_pair, validity, extensions)

    write_pem_file(config.out, encode_key(key_pair), encode_certificate(cert))
    log.info("wrote %s for %s (role=%s, sha256=%s)",
             config.out, config.common_name, config.role.value, pki.cert_fingerprint_hex(cert))
    return cert
