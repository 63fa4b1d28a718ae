"""
Test Suite for the Library Lending API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: /api/v1/books CRUD endpoints
- test_borrowers.py: /api/v1/borrowers endpoints
- test_lending.py: borrow/return endpoints and scenarios
- test_services.py: service functions called directly
- test_repositories.py: persistence gateway
- test_validation.py: input guards
- test_mappers.py: entity/DTO mapping
- test_rate_limiter.py: client keying and the 429 response
- test_app.py: health, root and error translation

Running Tests:
    pytest
    pytest --cov=library_api --cov-report=html
    pytest tests/test_lending.py -v
"""
