"""Mock implementations for testing."""

from tests.mocks.scheduling import ManualScheduler

__all__ = ["ManualScheduler"]
