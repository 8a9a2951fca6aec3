import os

import pytest

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


@pytest.fixture
def cycle_path():
    return os.path.join(DATA_DIR, "test_graph.txt")
