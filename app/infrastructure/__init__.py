"""
Infrastructure layer for the Gigboard marketplace.

This layer contains the implementation details for external systems integration:
- Database (SQLAlchemy)
- Identity tokens (Supabase Auth JWTs)
- File Storage (Supabase Storage)
- HTTP surface (FastAPI)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
