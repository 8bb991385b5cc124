"""
Test suite for bigdecimal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
