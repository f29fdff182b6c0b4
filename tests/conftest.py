"""Pytest fixtures for tests."""

from pathlib import Path

import pytest

from colorpicker.clipboard import MemoryClipboard
from colorpicker.models import AppConfig, Color
from colorpicker.services import ConfigService


class FakeSampler:
    """Screen sampler that holds on to the callback until the test answers it."""

    def __init__(self):
        self.callbacks = []

    def sample_once(self, callback):
        self.callbacks.append(callback)

    def answer(self, color):
        """Deliver a sampled color (or None for a cancelled sample)."""
        self.callbacks.pop(0)(color)


@pytest.fixture
def red():
    return Color.from_rgb255(255, 0, 0)


@pytest.fixture
def seven_colors():
    """Seven distinct colors, A through G."""
    return [Color.from_rgb255(i * 30, 255 - i * 30, 7 * i) for i in range(7)]


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def config_service(config_path):
    """ConfigService over a default AppConfig persisted under tmp_path."""
    return ConfigService[AppConfig](AppConfig, AppConfig(), default_path=config_path)


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def sampler():
    return FakeSampler()
