"""Pytest configuration and fixtures for Tempus tests."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import pytest

# Add the parent directory to sys.path so tempus can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tempus.units.timezone import Timezone  # noqa: E402


@pytest.fixture
def utc() -> Timezone:
    return Timezone.utc()


def _host_zone(monkeypatch: pytest.MonkeyPatch, rule: str):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", rule)
    time.tzset()
    yield Timezone.local()
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def eastern(monkeypatch: pytest.MonkeyPatch):
    """Switch the host zone to US Eastern (POSIX rule, no tz database needed)."""
    yield from _host_zone(monkeypatch, "EST5EDT,M3.2.0,M11.1.0")


@pytest.fixture
def central_european(monkeypatch: pytest.MonkeyPatch):
    """Switch the host zone to Central European Time, east of UTC."""
    yield from _host_zone(monkeypatch, "CET-1CEST,M3.5.0,M10.5.0/3")
