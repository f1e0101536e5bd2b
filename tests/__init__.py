"""Test suite for mocksmith.

Test Structure:
- domain/: Tests for models, parsing, mock generation and naming
- infrastructure/: Tests for the parser guard, configuration and logging
- application/: Tests for generator options and the Mocksmith facade
- utils/: Tests for include path resolution and file writing

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run libclang integration tests only
"""
