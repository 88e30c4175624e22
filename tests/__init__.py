"""
Test suite for big-num-arithmetic

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
