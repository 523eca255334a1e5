"""
Pytest configuration and shared fixtures
"""

import pytest


class PullCounter:
    """Callable for inspect() that records every value it sees"""

    def __init__(self):
        self.seen = []

    def __call__(self, value):
        self.seen.append(value)

    @property
    def count(self):
        return len(self.seen)


@pytest.fixture
def pull_counter():
    """Fresh counter of upstream pulls"""
    return PullCounter()


@pytest.fixture
def sample_values():
    """Small unsorted list with a duplicate"""
    return [3, 1, 4, 1, 5, 9, 2, 6]
