"""Shared fixtures for litmarkup tests."""

import asyncio

import pytest

from litmarkup.components import ComponentRegistry


class Deferred:
    """Awaitable that resolves to `value` after `delay` seconds.

    Appends its value to `log` when it settles, so tests can observe
    completion order.
    """

    def __init__(self, value, delay=0.0, log=None, error=None):
        self.value = value
        self.delay = delay
        self.log = log
        self.error = error

    def __await__(self):
        yield from asyncio.sleep(self.delay).__await__()
        if self.error is not None:
            raise self.error
        if self.log is not None:
            self.log.append(self.value)
        return self.value

    def __str__(self):
        return f"<Deferred {self.value}>"


@pytest.fixture
def deferred():
    return Deferred


@pytest.fixture
def run_async():
    """Drive an awaitable to completion on a fresh event loop."""

    def run(awaitable):
        async def main():
            return await awaitable

        return asyncio.run(main())

    return run


@pytest.fixture
def registry():
    """An empty component registry, used as the ambient resolver."""
    return ComponentRegistry()
