"""Test utilities for wingbeat applications.

    from wingbeat.testing import TestClient
"""

from wingbeat.testing.client import TestClient

__all__ = ["TestClient"]
