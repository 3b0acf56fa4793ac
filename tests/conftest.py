import pytest
from geojson_assembler.core.settings import settings


class Recorder:
    """Wraps a callback and records the arguments of every call."""

    def __init__(self, callback):
        self.callback = callback
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.callback(*args)


@pytest.fixture
def recorder():
    return Recorder


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    monkeypatch.setattr(settings, 'validate_output', False)
    monkeypatch.setattr(settings, 'strict_dimensions', True)
    return settings


@pytest.fixture
def square_ccw():
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def square_cw():
    return [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]


@pytest.fixture
def outer_3d():
    return [(0, 0, 0.5), (1.5, 0, 0.3), (1.5, 1.5, 0.6), (0, 1.5, 0.9)]


@pytest.fixture
def holes_3d():
    # First hole is clockwise, second one counterclockwise
    return [
        [(0.25, 0.25, 0.5), (0.35, 0.75, 0.6), (0.5, 0.25, 0.7)],
        [(1, 0.25, 0.5), (1.25, 0.25, 0.6), (1.125, 0.5, 0.7)],
    ]
