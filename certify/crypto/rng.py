# certify/crypto/rng.py
"""
Process-wide random number generator bootstrap.

Key generation draws from the operating system CSPRNG (through OpenSSL).
The CLI calls initialize() once at start-up; it blocks until the kernel
pool is seeded and fails loudly if no CSPRNG is available. Calling it
again is harmless. generate() refuses to run before it has been called.
"""
import os
import logging

from certify.common.errors import KeyGenerationError

log = logging.getLogger(__name__)

SEED_CHECK_BYTES = 32

_initialized = False


def initialize() -> None:
    global _initialized
    if _initialized:
        return
    try:
        sample = os.urandom(SEED_CHECK_BYTES)
    except (OSError, NotImplementedError) as e:
        raise KeyGenerationError(f"no usable random number generator: {e}") from e
    if len(sample) != SEED_CHECK_BYTES:
        raise KeyGenerationError("random number generator returned short read")
    _initialized = True
    log.debug("random number generator initialized")


def is_initialized() -> bool:
    return _initialized


def require() -> None:
    """Raise KeyGenerationError unless initialize() has run."""
    if not _initialized:
        raise KeyGenerationError("random number generator not initialized")
