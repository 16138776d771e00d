import pytest

from sample_data import Counter


@pytest.fixture
def counter() -> Counter:
    return Counter()
