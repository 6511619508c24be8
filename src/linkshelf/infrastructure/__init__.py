"""Infrastructure layer - External dependencies and implementations.

This layer contains all external dependencies including:
- Database adapters (SQLAlchemy)
- API routes (FastAPI)
- Authentication (JWT)
- Asset storage (filesystem, S3)
- Search index (Meilisearch over HTTP)
"""
