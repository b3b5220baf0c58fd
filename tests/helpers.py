"""Shared test doubles for the star trail engine."""

import random


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value.

    ``uniform(a, b)`` is derived from ``random()``, so it returns
    ``a + (b - a) * value``.
    """

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class RecordingCanvas:
    """Canvas stand-in that records every drawing call."""

    def __init__(self) -> None:
        self.available = True
        self.size = None
        self.calls = []

    def resize(self, width, height, dpr=1.0):
        if width < 0 or height < 0:
            raise ValueError("negative size")
        self.size = (width, height, dpr)

    def release(self):
        self.available = False

    def clear(self):
        self.calls.append(("clear",))

    def fill_ambient_glow(self, color, opacity):
        self.calls.append(("glow", color, opacity))

    def fill_circle(self, x, y, radius, color, opacity):
        self.calls.append(("circle", x, y, radius, color, opacity))

    def fill_polygon(self, points, color, opacity):
        self.calls.append(("polygon", points, color, opacity))

    def fill_radial_gradient(self, x, y, radius, color, opacity):
        self.calls.append(("gradient", x, y, radius, color, opacity))

    def of(self, kind):
        return [c for c in self.calls if c[0] == kind]

    def reset(self):
        self.calls = []
