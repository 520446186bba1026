# certify/common/errors.py
"""
Exceptions raised by the certificate pipeline.

Every failure is fatal to the run: nothing is retried, and the CLI prints
the message and exits non-zero.
"""


class CertifyError(Exception):
    """Base class for all pipeline errors."""


class KeyGenerationError(CertifyError):
    """RSA key generation failed (bad key length or RNG not initialized)."""


class DecodeError(CertifyError):
    """A loaded private key is not a usable PEM-encoded RSA key."""


class RangeError(CertifyError):
    """The requested validity window cannot be represented."""


class KeyMismatchError(CertifyError):
    """The signing key does not belong to the public key in the request."""


class SigningError(CertifyError):
    """The cryptographic backend refused to sign the certificate."""


class StorageError(CertifyError):
    """Reading or writing PEM material on disk failed."""


class PartialWriteError(StorageError):
    """Fewer bytes than expected reached the temporary file.

    The temporary file is left in place for inspection; its path is kept
    in ``temp_path``.
    """

    def __init__(self, message: str, temp_path: str):
        super().__init__(message)
        self.temp_path = temp_path
