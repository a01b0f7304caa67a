"""Pytest fixtures for BareEmitter tests."""

import pytest

from bareemitter import BareEmitter, ConfigType


@pytest.fixture
def emitter():
    """A fresh emitter with the default configuration."""
    return BareEmitter()


@pytest.fixture
def synchronized_emitter():
    """A fresh emitter whose registry is guarded by a lock."""
    return BareEmitter(ConfigType.SYNCHRONIZED)


@pytest.fixture
def calls():
    """Shared list that recording listeners append to, in call order."""
    return []


@pytest.fixture
def recorder(calls):
    """Build listeners that record (name, args) into ``calls``."""

    def make(name):
        def listener(*args):
            calls.append((name, args))

        return listener

    return make
