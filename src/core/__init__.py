"""
Core building blocks of the geometry primitives.

Exception taxonomy and numerical helpers shared by every geometric type.
Nothing here depends on the concrete shapes.
"""
