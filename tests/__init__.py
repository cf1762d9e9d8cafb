"""
Test suite for matrix calculator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
