"""
Core domain models, mathematical primitives, and contracts.

This module contains the matrix algebra engine and its value objects,
independent of any console or user-input handling.
"""
