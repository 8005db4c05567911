import pygame
import json
import os
from config import *
from raycasting.camera import FixedView
from raycasting.emitter import Emitter
from raycasting.segment import Segment
import torch


def read_map(filepath):
    """ Reads a map file.
        Returns a tuple containing:
        - the walls (list of Segment)
        - the start position ([x, y] or None)
        Raises FileNotFoundError, json.JSONDecodeError, or KeyError/TypeError/ValueError/IndexError
        for a malformed file.
    """
    with open(filepath, 'r') as f:
        map_data = json.load(f)
    walls = [Segment.from_pair(pair) for pair in map_data["walls"]]
    start_pos = map_data.get("start_pos")
    if start_pos is not None:
        start_pos = [float(start_pos[0]), float(start_pos[1])]
    return walls, start_pos


class Scene:
    def __init__(self, map_name=DEFAULT_MAP):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 24)
        self.running = True

        self.camera = FixedView()
        self.device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
        print(f"Using device: {self.device}")
        self.emitter = Emitter(self.device)

        self.walls = []
        self.start_pos = (0.0, 0.0) # Default if map has no start_pos
        self.hits = []

        self.show_rays = True  # Toggle ray stubs with 'R'
        self.batched = BATCHED_CASTING

        self.load_map(map_name)

    def use_default_walls(self):
        self.walls = [Segment.from_pair(pair) for pair in DEFAULT_WALLS]

    def load_map(self, filename):
        filepath = os.path.join(MAP_DIR, filename)
        try:
            self.walls, loaded_start_pos = read_map(filepath)
            if loaded_start_pos:
                self.start_pos = tuple(loaded_start_pos)
            else:
                print(f"Warning: No start position found in map '{filename}'. Using default {self.start_pos}.")
            print(f"Map '{filename}' loaded successfully.")
        except FileNotFoundError:
            print(f"Error: Map file not found '{filepath}'. Using default walls.")
            self.use_default_walls()
        except (ValueError, KeyError, TypeError, IndexError) as e:
            print(f"Error loading map: {e}. Using default walls.")
            self.use_default_walls()
        self.emitter.update(*self.start_pos)

    def window_size(self):
        return self.screen.get_size()

    def handle_input(self):
        last_pos = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    self.running = False
                if event.key == pygame.K_r: # Toggle ray stubs
                    self.show_rays = not self.show_rays
            if event.type == pygame.MOUSEMOTION:
                last_pos = event.pos
        # Only the latest pointer position of the frame matters
        if last_pos is not None:
            world_pos = self.camera.unproject(last_pos, self.window_size())
            self.emitter.update(world_pos.x, world_pos.y)

    def update(self):
        if self.batched:
            self.hits = self.emitter.look_batched(self.walls)
        else:
            self.hits = self.emitter.look(self.walls)

    def step(self):
        """One frame without drawing: input, then nearest hits. Returns the (origin, hit) pairs."""
        self.handle_input()
        self.update()
        return self.hits

    def draw_line(self, color, start, end, width=1):
        size = self.window_size()
        pygame.draw.line(self.screen, color, self.camera.project(start, size), self.camera.project(end, size), width)

    def draw(self):
        self.screen.fill(BLACK)

        # Draw walls
        for wall in self.walls:
            self.draw_line(WHITE, wall.a, wall.b, 2)

        # Draw ray stubs (if enabled)
        if self.show_rays:
            for start, end in self.emitter.show():
                self.draw_line(YELLOW, start, end)

        # Draw nearest hits
        for origin, hit in self.hits:
            self.draw_line(GREY, origin, hit)

        info_text = self.font.render(f"Pos: ({self.emitter.pos.x:.0f}, {self.emitter.pos.y:.0f}) | Hits: {len(self.hits)}/{len(self.emitter.rays)}", True, WHITE)
        self.screen.blit(info_text, (10, 10))

        pygame.display.flip()

    def run(self):
        while self.running:
            self.clock.tick(FPS)
            self.step()
            self.draw()

        pygame.quit()
