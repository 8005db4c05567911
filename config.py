# Configuration file for the raycasting sandbox

# Screen dimensions
WIDTH, HEIGHT = 1000, 800
FPS = 60
TITLE = "Raycasting"

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)    # Walls
YELLOW = (255, 255, 0) # Ray stubs
GREY = (120, 120, 120)

# Map configuration
MAP_DIR = "maps"
DEFAULT_MAP = "default.json"

# Raycasting
NUM_RAYS = 360 # One ray per degree
RAY_STUB_LENGTH = 10.0 # Length of the short ray drawn for every ray
BATCHED_CASTING = True # Use the torch path for the per-frame query

# Walls used when no map can be loaded (world coordinates, origin at screen center, y up)
DEFAULT_WALLS = [
    [[300.0, 100.0], [300.0, 300.0]],
    [[-300.0, -100.0], [300.0, 300.0]],
    [[-300.0, 100.0], [400.0, -250.0]],
    [[300.0, 80.0], [400.0, -250.0]],
]
