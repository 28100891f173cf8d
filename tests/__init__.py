"""
Test suite for the geometry primitives

Contains:
- tests/unit/          : Unit tests for individual modules
"""
