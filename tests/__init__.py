"""
Test suite for score_ledger

Contains:
- tests/unit/          : Unit tests per component and facade scenarios
"""
