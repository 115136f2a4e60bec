"""
Test suite for complex-value

Contains:
- tests/unit/          : Unit tests for individual modules
"""
