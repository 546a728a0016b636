"""
Test suite for snaccs

Contains:
- tests/unit/          : Unit tests for formatters, parsers, config and rules
"""
