"""
Pytest fixtures for tsukumo calculator tests.

Provides a fresh model and an observer that records every callback.
"""

import pytest
from pathlib import Path

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tsukumo.state import ModelObserver, TsukumoModel, TsukumoStatus


class RecordingObserver(ModelObserver):
    """Observer that records (callback, args) in arrival order."""

    def __init__(self, name: str = "recorder"):
        self.name = name
        self.calls: list[tuple] = []

    def on_update_current_exp(self, exp):
        self.calls.append(("current_exp", exp))

    def on_update_current_level(self, level):
        self.calls.append(("current_level", level))

    def on_update_max_exp_of_current_level(self, max_exp):
        self.calls.append(("max_exp", max_exp))

    def on_update_to_level(self, to_level):
        self.calls.append(("to_level", to_level))

    def on_update_to_level_min(self, to_level_min):
        self.calls.append(("to_level_min", to_level_min))

    def on_update_necessary_tsukumo(self, exp, source):
        self.calls.append(("necessary", exp, source))

    def on_log_text_changed(self, log_text):
        self.calls.append(("log", log_text))

    def of(self, kind: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == kind]

    def last(self, kind: str) -> tuple | None:
        matching = self.of(kind)
        return matching[-1] if matching else None

    def reset(self) -> None:
        self.calls.clear()


@pytest.fixture
def model():
    """Fresh, uninitialized model."""
    return TsukumoModel()


@pytest.fixture
def recorder(model):
    """Recording observer registered with the model."""
    observer = RecordingObserver()
    model.register_observer(observer)
    return observer


@pytest.fixture
def initialized(model, recorder):
    """Initialized model whose recorder starts empty."""
    model.initialize()
    recorder.reset()
    return model


@pytest.fixture
def status():
    """Status at level 0 with no exp and no active bonus."""
    return TsukumoStatus()
