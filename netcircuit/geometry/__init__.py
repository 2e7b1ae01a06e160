from .primitives import Point, Rect
