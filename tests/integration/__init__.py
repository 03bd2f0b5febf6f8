"""
Integration Tests - End-to-End Service Tests.

These tests verify that all components work together correctly,
reading the sample data under tests/fixtures.

Test Files:
    - test_equity_service.py: Ingestion and queries
    - test_cli.py: Command-line entry point
"""
