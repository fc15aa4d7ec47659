"""
Command Line Interface Package

``expenses`` entry point: add, update, delete, list, summary and report
commands over the configured ledger file, plus version/config/info utilities.
"""
