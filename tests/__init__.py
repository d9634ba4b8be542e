"""
Test suite for matcalc

Contains:
- tests/unit/          : Unit tests for the domain model, arithmetic core, contracts and I/O
"""
