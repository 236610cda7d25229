"""
Test suite for halflattice

Contains:
- tests/unit/          : Unit tests for individual modules
"""
