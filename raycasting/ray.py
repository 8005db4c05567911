import math
import pygame


class Ray:
    def __init__(self, pos, angle):
        self.pos = pygame.Vector2(pos)
        # 0 degrees = right, counter-clockwise with y up
        self._dir = (math.cos(math.radians(angle)), math.sin(math.radians(angle)))

    @property
    def dir(self):
        return pygame.Vector2(self._dir)

    def end(self, length):
        """Point `length` units along the ray, used to draw it."""
        return self.pos + self.dir * length

    def cast(self, wall):
        """ Intersects the ray with a wall segment.
            Returns the hit point as a pygame.Vector2, or None when:
            - the ray and the wall are parallel (den is exactly 0)
            - the crossing is outside the wall, endpoints included (t not in (0, 1))
            - the crossing is behind the ray origin (u <= 0)
        """
        x1, y1 = wall.a
        x2, y2 = wall.b

        x3, y3 = self.pos
        x4 = x3 + self._dir[0]
        y4 = y3 + self._dir[1]

        den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        if den == 0:
            return None

        t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den # position along the wall
        u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den # position along the ray
        if 0 < t < 1 and u > 0:
            return pygame.Vector2(x1 + t * (x2 - x1), y1 + t * (y2 - y1))
        return None
