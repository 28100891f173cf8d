"""
Geometry — Геометрические примитивы на плоскости

Point, Vector, Line, Circle и положение точки относительно фигуры.
"""

# Primitives
from src.geometry.primitives import (
    Point,
    Vector,
)

# Line
from src.geometry.line import Line

# Circle
from src.geometry.circle import (
    Circle,
    Position,
)

__all__ = [
    # Primitives
    "Point",
    "Vector",
    # Line
    "Line",
    # Circle
    "Circle",
    "Position",
]
