# certify/common/utils.py
import socket
import datetime
from typing import Iterable, List


def utc_now() -> datetime.datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def unique_names(names: Iterable[str]) -> List[str]:
    """Strip, drop duplicates and sort DNS names. Empty or non-ASCII names raise ValueError."""
    out = set()
    for name in names:
        name = name.strip()
        if not name:
            raise ValueError("alternative name must not be empty")
        if not name.isascii():
            raise ValueError(f"alternative name {name!r} must be ASCII (use the IDNA A-label form)")
        out.add(name)
    return sorted(out)


def hostnames() -> List[str]:
    """
    Canonical names of this host, as reported by getaddrinfo() for
    gethostname(). Used for --dns.
    """
    hostname = socket.gethostname()
    infos = socket.getaddrinfo(hostname, None, flags=socket.AI_CANONNAME)
    return [info[3] for info in infos if info[3]]
