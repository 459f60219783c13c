# limbvault Test Suite
"""
Test suite including:
- Unit tests for BigUint and modular arithmetic
- Security tests (invalid inputs, error paths)
- Integration tests (RSA over BigUint, key import, CLI)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
