"""
Test Suite for Books API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: End-to-end tests for the /books endpoints
- test_book_service.py: Validation and pagination rules with a mocked repository
- test_book_repository.py: SQL behaviour and storage error classification
- test_main.py: Error envelope, health check, debug logging
- test_config.py: Settings and Database handle construction

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
