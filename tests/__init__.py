"""
Test Suite for Equity Lookup.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end service and CLI tests
    - fixtures/: Shared test data

Running Tests:
    pytest tests/                       # All tests
    pytest tests/unit/                  # Unit tests only
    pytest tests/integration/           # Integration tests only
    pytest --cov=src/equity_lookup      # With coverage
"""
