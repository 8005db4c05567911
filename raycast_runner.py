# raycast_runner.py
from config import *
from raycasting import Scene

# --- Main Execution ---
if __name__ == "__main__":
    scene = Scene()
    scene.run()
