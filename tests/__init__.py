"""
Test Suite for Pokédex Validator.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Command line tests
    - fixtures/: Sample data and configuration

Running Tests:
    pytest tests/                    # All tests
    pytest tests/unit/               # Unit tests only
    pytest tests/integration/        # Integration tests only
"""
