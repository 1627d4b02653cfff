"""
Test suite for natural-lcm

Contains:
- tests/unit/          : Unit tests for individual modules
"""
