"""Shared fixtures for point-set tests."""

import itertools

import pytest


class ScriptedSource:
    """Random source replaying fixed values, counting how many were drawn."""

    def __init__(self, values, repeat=False):
        self._values = itertools.cycle(values) if repeat else iter(values)
        self.draws = 0

    def random(self):
        self.draws += 1
        return next(self._values)


@pytest.fixture
def scripted():
    return ScriptedSource
