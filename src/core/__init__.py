"""
Core domain models, mathematical primitives, and contracts.

This module contains the ComplexNumber value type and the numerical
guards and JSON contracts it is built on.
"""
