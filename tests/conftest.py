"""
Pytest configuration for test discovery and shared fixtures.

Ensures the project root is on sys.path so that `import greeknames` works
regardless of how pytest is invoked (e.g., `pytest` or `pytest tests/`).
"""

import os
import sys
from typing import List

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)


@pytest.fixture
def tables():
    """Default knowledge tables."""
    from greeknames.core.tables import default_tables

    return default_tables()


@pytest.fixture
def corrector():
    """A corrector over the default tables."""
    from greeknames.corrector import GreekNameCorrector

    return GreekNameCorrector()
