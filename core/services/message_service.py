# =============================================================================
# core/services/message_service.py - Contact Message Store Access
# =============================================================================
# Handles the SQLite `messages` table: insert from the public contact form,
# list and delete from the admin dashboard. Messages are never updated.
# =============================================================================

import logging
import sqlite3

from core.models.message import ContactRequest, Message
from lib.database import DatabaseError

logger = logging.getLogger(__name__)


class MessageService:
    """Service for contact message operations."""

    @staticmethod
    def list_messages(conn: sqlite3.Connection) -> list[Message]:
        """
        List all messages, newest first.

        Raises:
            DatabaseError: If the query fails
        """
        try:
            rows = conn.execute(
                "SELECT id, name, email, message, created_at FROM messages "
                "ORDER BY created_at DESC, id DESC"
            ).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to list messages: {e}")
            raise DatabaseError(f"Failed to list messages: {e}") from e

        return [Message(**dict(row)) for row in rows]

    @staticmethod
    def create_message(conn: sqlite3.Connection, contact: ContactRequest) -> int:
        """
        Store a contact message.

        Args:
            conn: Open database connection
            contact: Validated contact form

        Returns:
            The generated message id

        Raises:
            DatabaseError: If the insert fails
        """
        try:
            cursor = conn.execute(
                "INSERT INTO messages (name, email, message) VALUES (?, ?, ?)",
                [contact.name, contact.email, contact.message],
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to store contact message: {e}")
            raise DatabaseError(
                f"Failed to store message: {e}",
                code="DB_ERROR",
                suggestion="Try again later",
            ) from e

        message_id = cursor.lastrowid
        logger.info(f"Stored contact message {message_id} from {contact.email}")
        return message_id

    @staticmethod
    def delete_message(conn: sqlite3.Connection, message_id: int) -> bool:
        """
        Delete a message by id. Unknown ids are a no-op.

        Returns:
            True if a row was removed

        Raises:
            DatabaseError: If the delete fails
        """
        try:
            cursor = conn.execute("DELETE FROM messages WHERE id = ?", [message_id])
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to delete message {message_id}: {e}")
            raise DatabaseError(
                f"Failed to delete message: {e}",
                details={"message_id": message_id},
            ) from e

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted message: {message_id}")
        return deleted
