"""
Unit Tests for Othello Search

This package contains unit tests for all search library components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=othello_search --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestKnownTree::test_maximizer_to_move

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
