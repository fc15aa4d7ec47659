"""
Test Suite for the Expense Ledger

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and end-to-end workflow tests
"""
