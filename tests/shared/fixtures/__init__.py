"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.factories import TestProfesorFactory
from tests.shared.fixtures.memory_repository import InMemoryProfesorRepository

__all__ = [
    "InMemoryProfesorRepository",
    "TestProfesorFactory",
]
