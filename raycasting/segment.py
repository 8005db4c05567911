import pygame


class Segment:
    """A static wall between two points. Endpoints can't be changed once built."""

    __slots__ = ("_a", "_b")

    def __init__(self, a, b):
        object.__setattr__(self, "_a", (float(a[0]), float(a[1])))
        object.__setattr__(self, "_b", (float(b[0]), float(b[1])))

    def __setattr__(self, name, value):
        raise AttributeError("Segment is immutable")

    @classmethod
    def from_pair(cls, pair):
        """Build a segment from a [[x1, y1], [x2, y2]] pair, as stored in map files."""
        a, b = pair
        return cls(a, b)

    @property
    def a(self):
        return pygame.Vector2(self._a)

    @property
    def b(self):
        return pygame.Vector2(self._b)

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self._a == other._a and self._b == other._b

    def __hash__(self):
        return hash((self._a, self._b))

    def __repr__(self):
        return f"Segment({self._a}, {self._b})"
