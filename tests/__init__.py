"""
Test suite for cssvalues

Contains:
- tests/unit/ : Unit tests for individual modules
"""
