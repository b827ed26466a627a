"""
Pytest configuration and fixtures for all tests.
"""

import os
import pytest

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'DEBUG')
os.environ.setdefault('CORS_ORIGINS', '*')

from mailsift import reset_engine


@pytest.fixture(autouse=True)
def fresh_engine():
    """Every test starts from an uninitialized engine."""
    reset_engine()
    yield
    reset_engine()
