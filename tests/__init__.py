"""
Test suite for dynamic containers

Contains:
- tests/unit/          : Unit tests for individual modules
"""
