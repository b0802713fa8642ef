import pytest

from auto_clicker.backend import BackendError
from auto_clicker.geometry import Coordinate


class FakeBackend:
    """Replays scripted probe results; an exception instance is raised instead of returned."""

    def __init__(self, positions, click_errors=None, on_probe=None):
        self.positions = list(positions)
        self.click_errors = dict(click_errors or {})
        self.on_probe = on_probe
        self.probes = 0
        self.clicks = 0

    def position(self):
        self.probes += 1
        if self.on_probe:
            self.on_probe(self.probes)
        item = self.positions.pop(0) if len(self.positions) > 1 else self.positions[0]
        if isinstance(item, BackendError):
            raise item
        return Coordinate(*item)

    def click(self):
        err = self.click_errors.get(self.clicks + 1)
        if err is not None:
            raise err
        self.clicks += 1


@pytest.fixture
def fake_backend():
    return FakeBackend
