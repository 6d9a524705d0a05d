"""Pytest configuration and shared fixtures for layout scheme tests."""

import sys
from pathlib import Path

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sxp_layout import parse, parse_with_diagnostics, LayoutEngine
from tests.helpers import FakeHost


@pytest.fixture
def parse_snippet():
    """Parse scheme text and return the root node."""
    def _parse(text):
        return parse(text)
    return _parse


@pytest.fixture
def parse_snippet_with_warnings():
    """Parse scheme text and return (root, warnings)."""
    def _parse(text):
        return parse_with_diagnostics(text)
    return _parse


@pytest.fixture
def items():
    return ['A', 'B', 'C', 'D']


@pytest.fixture
def host():
    return FakeHost(['A', 'B', 'C'], frame=(0, 0, 100, 100))


@pytest.fixture
def engine(host):
    return LayoutEngine(host.get_items, host.get_frame, host.apply)
