# tests/conftest.py

from collections import deque
from typing import List, Optional

import pytest


class ScriptedSource:
    """RandomSource returning queued values and recording the bounds it was asked for."""

    def __init__(self, ints=(), floats=(), bools=()):
        self.ints = deque(ints)
        self.floats = deque(floats)
        self.bools = deque(bools)
        self.bounds: List[Optional[int]] = []

    def next_int(self, bound=None):
        self.bounds.append(bound)
        return self.ints.popleft()

    def next_float(self):
        return self.floats.popleft()

    def next_boolean(self):
        return self.bools.popleft()


@pytest.fixture
def make_source():
    return ScriptedSource
