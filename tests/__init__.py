"""
Test suite for scaled_decimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
