import datetime

import pytest

NOW = datetime.datetime(2026, 10, 18, 12, 0, tzinfo=datetime.UTC)


@pytest.fixture(name="now")
def now_fixture() -> datetime.datetime:
    return NOW
