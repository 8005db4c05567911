from .segment import Segment
from .ray import Ray
from .emitter import Emitter
from .helpers import nearest_intersections
from .camera import FixedView
from .scene import Scene

__all__ = ['Segment', 'Ray', 'Emitter', 'nearest_intersections', 'FixedView', 'Scene']
