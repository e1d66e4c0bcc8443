"""
Shared module for code used by the REST API and the CLI.

STRUCTURE:
- shared.config: Configuration
  - settings.py: Environment config (pydantic-settings)
  - logging.py: Structured logging
  - constants.py: EntityStatus, Limits, ErrorMessages

- shared.infrastructure: Database, cache and request tracing
  - db.py: SQLAlchemy engine and sessions, safe_commit()
  - redis_client.py: Optional Redis client for connectivity checks
  - correlation.py: X-Request-ID middleware and log filter

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - validators.py: Status and URL validation, SSRF prevention
  - schemas.py: Request/response Pydantic schemas
  - health.py: Health check decorators

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import EntityStatus
    from shared.utils.exceptions import NotFoundError, ValidationError
    from shared.utils.schemas import UserCreate, UserOutput
"""
