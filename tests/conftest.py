import pytest


class FakePins:
    """Pin capability that records writes and replays scripted reads.

    reads is a list of status bytes; None in the list simulates a failed
    read. When the script runs out the last entry keeps repeating.
    """

    def __init__(self, reads=None, fail_paths=()):
        self.reads = list(reads or [])
        self.fail_paths = set(fail_paths)
        self.writes = []
        self.read_count = 0
        self.on_write = None
        self.on_read = None

    def write(self, path, value):
        self.writes.append((path, value))
        if self.on_write is not None:
            self.on_write(path, value)
        return path not in self.fail_paths

    def read_byte(self, path):
        self.read_count += 1
        if self.on_read is not None:
            self.on_read(self.read_count)
        if len(self.reads) > 1:
            return self.reads.pop(0)
        return self.reads[0] if self.reads else None

    def values_written(self, path):
        return [value for p, value in self.writes if p == path]


@pytest.fixture
def fake_pins():
    return FakePins
