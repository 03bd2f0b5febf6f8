"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_field_validator.py: Single-field rules
    - test_record_factory.py: Line parsing and rejection
    - test_equity_store.py: Keyed container and query primitives
    - test_predicates.py: Selectors and comparators
    - test_config_loader.py: Configuration loading/validation
"""
