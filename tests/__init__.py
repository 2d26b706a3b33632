"""Test suite for nxdt-paths.

Test Structure:
- core/: Tests for UTF-8 decoding, sanitization, truncation and path generation
- config/: Tests for configuration management
- infrastructure/: Tests for logging setup and progress tracking
- test_main.py: Command line runs

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run CLI tests only
"""
