# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the portfolio site:
# - test_models.py: Pydantic model validation
# - test_services.py: Post/message store access against a real SQLite file
# - test_rendering.py: HTML rendering, escaping and the markdown subset
# - test_sessions.py: Session store and the admin guard
# - test_public_routes.py / test_admin_routes.py: HTTP endpoints
# - test_local_cms.py: Key-value storage and the local CMS workspace
#
# Run tests with: pytest
# =============================================================================
