"""
Test suite for fittrack-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
