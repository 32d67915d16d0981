# =============================================================================
# core/services/post_service.py - Blog Post Store Access
# =============================================================================
# Handles post CRUD against the SQLite `posts` table.
# Separates HTTP concerns from database logic.
#
# Every method takes the request's connection explicitly; nothing here holds
# a connection of its own.
# =============================================================================

import logging
import sqlite3

from core.models.post import Post, PostSummary, PostUpsert
from lib.database import DatabaseError

logger = logging.getLogger(__name__)


class PostService:
    """
    Service for blog post operations.

    Provides a clean interface between routes and the database.
    """

    @staticmethod
    def list_posts(conn: sqlite3.Connection) -> list[PostSummary]:
        """
        List all posts, newest first.

        Args:
            conn: Open database connection

        Returns:
            Post summaries (no content), ordered by created_at descending

        Raises:
            DatabaseError: If the query fails
        """
        try:
            rows = conn.execute(
                "SELECT id, slug, title, excerpt, created_at FROM posts "
                "ORDER BY created_at DESC, id DESC"
            ).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to list posts: {e}")
            raise DatabaseError(f"Failed to list posts: {e}") from e

        return [PostSummary(**dict(row)) for row in rows]

    @staticmethod
    def get_post(conn: sqlite3.Connection, slug: str) -> Post | None:
        """
        Fetch one post by slug.

        Returns:
            The post, or None if no post has this slug

        Raises:
            DatabaseError: If the query fails
        """
        try:
            row = conn.execute(
                "SELECT id, slug, title, excerpt, content, created_at FROM posts WHERE slug = ?",
                [slug],
            ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to fetch post {slug!r}: {e}")
            raise DatabaseError(
                f"Failed to fetch post: {e}",
                details={"slug": slug},
            ) from e

        return Post(**dict(row)) if row else None

    @staticmethod
    def upsert_post(conn: sqlite3.Connection, post: PostUpsert) -> Post:
        """
        Create a post, or replace title/excerpt/content of the post with the
        same slug.

        The existing row is updated in place, so its id and created_at are
        kept.

        Args:
            conn: Open database connection
            post: Validated post fields

        Returns:
            The stored post

        Raises:
            DatabaseError: If the write fails
        """
        try:
            conn.execute(
                """
                INSERT INTO posts (slug, title, excerpt, content) VALUES (?, ?, ?, ?)
                ON CONFLICT(slug) DO UPDATE SET
                    title = excluded.title,
                    excerpt = excluded.excerpt,
                    content = excluded.content
                """,
                [post.slug, post.title, post.excerpt, post.content],
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to upsert post {post.slug!r}: {e}")
            raise DatabaseError(
                f"Failed to save post: {e}",
                details={"slug": post.slug},
            ) from e

        stored = PostService.get_post(conn, post.slug)
        if stored is None:
            raise DatabaseError(
                "Post was saved but could not be read back",
                details={"slug": post.slug},
            )

        logger.info(f"Saved post: {stored.slug} (id={stored.id})")
        return stored

    @staticmethod
    def delete_post(conn: sqlite3.Connection, slug: str) -> bool:
        """
        Delete the post with this slug.

        Deleting a slug that doesn't exist is a no-op.

        Returns:
            True if a row was removed

        Raises:
            DatabaseError: If the delete fails
        """
        try:
            cursor = conn.execute("DELETE FROM posts WHERE slug = ?", [slug])
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to delete post {slug!r}: {e}")
            raise DatabaseError(
                f"Failed to delete post: {e}",
                details={"slug": slug},
            ) from e

        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted post: {slug}")
        return deleted
