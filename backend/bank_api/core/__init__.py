# bank_api/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Account-number priming and demo seeding on startup
- db: Database configuration and connection management
- errors: Error taxonomy and the {"error": ...} response envelope
- numbering: Sequential account-number allocator
- security: Password hashing and JWT token creation/validation
"""
