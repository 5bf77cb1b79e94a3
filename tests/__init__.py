"""
Test Suite for CampusCoffee API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_review_service.py: Review rules without HTTP
- test_stores.py: Data stores
- test_concurrency.py: Concurrent approvals of one review
- test_reviews.py: Tests for /api/v1/reviews endpoints
- test_pos.py: Tests for /api/v1/pos endpoints
- test_users.py: Tests for /api/v1/users endpoints
- test_config.py: Settings parsing and validation
- test_app.py: Health check and rate limiter keys

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=campuscoffee --cov-report=html

    # Run specific file
    pytest tests/test_review_service.py
"""
