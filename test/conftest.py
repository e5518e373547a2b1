import os

# Antes de importar los adaptadores: leen estas variables al importarse.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ORM"] = "memory"

import pytest

from fakes import ManualClock


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
