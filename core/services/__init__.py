# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .local_cms import LocalCMS
from .message_service import MessageService
from .post_service import PostService

__all__ = [
    "LocalCMS",
    "MessageService",
    "PostService",
]
