import numpy as np
import pygame
import torch
from config import *
from raycasting.helpers import distance, nearest_intersections, walls_to_tensors
from raycasting.ray import Ray


class Emitter:
    """A movable point casting one ray per degree over the full circle."""

    def __init__(self, device=None):
        self.pos = pygame.Vector2(0, 0)
        self.rays = [Ray((0, 0), a) for a in range(NUM_RAYS)]
        self.device = device if device is not None else torch.device("cpu")
        # Directions don't change, keep them on the device for the batched query
        self.dirs_t = torch.tensor([tuple(ray.dir) for ray in self.rays], dtype=torch.float64, device=self.device)
        self._walls = None
        self._walls_t = None

    def update(self, x, y):
        self.pos.update(x, y)
        for ray in self.rays:
            ray.pos.update(x, y)

    def closest_hits(self, walls):
        """ Nearest hit for every ray, indexed by degree.
            Returns a list of pygame.Vector2, with None for rays that hit nothing.
        """
        hits = []
        for ray in self.rays:
            closest = None
            record = None
            for wall in walls:
                pt = ray.cast(wall)
                if pt is None:
                    continue
                d = distance(self.pos, pt)
                if record is None or d < record:
                    record = d
                    closest = pt
            hits.append(closest)
        return hits

    def look(self, walls):
        """Returns (origin, hit) pairs for the rays hitting a wall, in degree order."""
        return [(pygame.Vector2(self.pos), hit) for hit in self.closest_hits(walls) if hit is not None]

    def look_batched(self, walls):
        """Same result as look(), with all rays × all walls computed at once by torch."""
        walls = list(walls)
        if walls != self._walls:
            self._walls = walls
            self._walls_t = walls_to_tensors(walls, self.device)
        wall_a, wall_b = self._walls_t

        origin = torch.tensor([self.pos.x, self.pos.y], dtype=torch.float64, device=self.device)
        origins = origin.unsqueeze(0).repeat(len(self.rays), 1)  # shape (N,2)
        hits_t, mask_t = nearest_intersections(origins, self.dirs_t, wall_a, wall_b)

        hits = hits_t.cpu().numpy()
        mask = mask_t.cpu().numpy()
        return [(pygame.Vector2(self.pos), pygame.Vector2(float(x), float(y))) for x, y in hits[np.flatnonzero(mask)]]

    def show(self, length=RAY_STUB_LENGTH):
        """Returns (origin, end) pairs of the short ray stubs, one per ray."""
        return [(pygame.Vector2(ray.pos), ray.end(length)) for ray in self.rays]
