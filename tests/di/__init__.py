"""Test containers and mock components."""

# Registers the mock as a PersistenceProvider subclass before any container is built
from tests.di.persistence import MockPersistenceProvider
from tests.di.container import build_test_container

__all__ = ["MockPersistenceProvider", "build_test_container"]
