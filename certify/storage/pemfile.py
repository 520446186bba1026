# certify/storage/pemfile.py
"""
Atomic persistence of the key + certificate PEM file.

File format: PEM private key, one newline, PEM certificate.

The file is written to a temporary file in the destination directory and
renamed onto the destination, so readers see either the previous content
or the complete new content. The temporary file must live on the same
filesystem as the destination; a cross-filesystem destination (e.g. a
symlinked directory on another mount) is not supported.

On a short write the temporary file is kept for inspection and its path
is reported in PartialWriteError.temp_path. On any other I/O error it is
removed.
"""
import os
import logging
import tempfile
from typing import BinaryIO, Tuple

from certify.common.errors import DecodeError, PartialWriteError, StorageError

log = logging.getLogger(__name__)

DELIMITER = "\n"
CERT_MARKER = "-----BEGIN CERTIFICATE-----"
TEMP_PREFIX = "certify-"
TEMP_SUFFIX = ".tmp"


def _open_temp(directory: str) -> Tuple[BinaryIO, str]:
    # mkstemp creates the file with mode 0600
    fd, tmp = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX, dir=directory)
    return os.fdopen(fd, "wb", buffering=0), tmp


def _write(f: BinaryIO, data: bytes, tmp: str) -> None:
    written = f.write(data)
    if written != len(data):
        raise PartialWriteError(
            f"Failed to write {len(data)} bytes to {tmp} (wrote {written})", tmp)


def _discard(tmp: str) -> None:
    try:
        os.remove(tmp)
    except FileNotFoundError:
        pass
    except OSError as e:
        log.warning("could not remove temporary file %s: %s", tmp, e)


def write_pem_file(path: str, key_pem: str, cert_pem: str) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    try:
        f, tmp = _open_temp(directory)
    except OSError as e:
        raise StorageError(f"cannot create temporary file in {directory}: {e}") from e

    try:
        with f:
            for chunk in (key_pem, DELIMITER, cert_pem):
                _write(f, chunk.encode("ascii"), tmp)
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except PartialWriteError:
        log.error("short write, keeping %s for inspection", tmp)
        raise
    except OSError as e:
        _discard(tmp)
        raise StorageError(f"cannot write {path}: {e}") from e
    log.debug("wrote %s", path)


def read_pem_file(path: str) -> Tuple[str, str]:
    """Split a file written by write_pem_file() into (key_pem, cert_pem)."""
    try:
        with open(path, "r", encoding="ascii") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"cannot read {path}: {e}") from e

    idx = text.find(CERT_MARKER)
    if idx <= 0:
        raise DecodeError(f"{path} does not contain a private key followed by a certificate")
    key_pem = text[:idx]
    if key_pem.endswith(DELIMITER):
        key_pem = key_pem[:-len(DELIMITER)]
    return key_pem, text[idx:]
