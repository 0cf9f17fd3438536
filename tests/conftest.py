from datetime import datetime

import pytest


class FakeClock:
    """Returns a fixed moment, advanced by hand."""

    def __init__(self, moment=datetime(2025, 11, 3, 14, 5, 9)):
        self.moment = moment

    def __call__(self):
        return self.moment


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def words_file(tmp_path):
    def write(*words):
        path = tmp_path / "countries.txt"
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return path
    return write
