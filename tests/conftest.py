import datetime

import pytest

from certify.crypto import keys, rng

NOW = datetime.datetime(2026, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)


@pytest.fixture(scope="session")
def key_pair():
    rng.initialize()
    return keys.generate(2048)


@pytest.fixture(scope="session")
def other_key_pair():
    rng.initialize()
    return keys.generate(1024)


@pytest.fixture(autouse=True)
def rng_ready():
    rng.initialize()


@pytest.fixture
def now():
    return NOW
