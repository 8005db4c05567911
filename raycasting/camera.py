import pygame


class FixedView:
    """Planar camera that never moves: world origin at the window center, y pointing up."""

    def unproject(self, screen_pos, window_size):
        """Screen pixel coordinates -> world coordinates."""
        w, h = window_size
        return pygame.Vector2(screen_pos[0] - w / 2, h / 2 - screen_pos[1])

    def project(self, world_pos, window_size):
        """World coordinates -> screen pixel coordinates."""
        w, h = window_size
        return pygame.Vector2(world_pos[0] + w / 2, h / 2 - world_pos[1])
