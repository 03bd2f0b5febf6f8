"""
Test Fixtures - Shared Test Data.

This package contains reusable test data:
    - input000.txt: Header, 17 valid equity lines and 8 invalid lines
    - sample_config.yaml: Sample configuration for testing
"""
