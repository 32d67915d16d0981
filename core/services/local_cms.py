# =============================================================================
# core/services/local_cms.py - Local CMS Workspace
# =============================================================================
# Single-user project/post workspace kept in a KeyValueStorage under three
# keys:
# - "projects": list of LocalProject dicts (newest first)
# - "posts":    list of LocalPost dicts (newest first)
# - "theme":    dark-mode flag
#
# There is no authentication: whoever can write the storage file owns it.
# Missing keys are seeded with sample content on first read.
#
# Usage:
#   from core.services.local_cms import LocalCMS
#   cms = LocalCMS(KeyValueStorage("local_cms.json"))
#   cms.upsert_project(LocalProject(title="CLI tool", lang="Python"))
# =============================================================================

import logging

from pydantic import ValidationError

from core.models.local import LocalPost, LocalProject
from lib.local_storage import KeyValueStorage
from lib.utils import timestamp_id

logger = logging.getLogger(__name__)

PROJECTS_KEY = "projects"
POSTS_KEY = "posts"
THEME_KEY = "theme"

ALL_LANGUAGES = "All"
PREVIEW_LENGTH = 300


def sample_projects() -> list[LocalProject]:
    return [
        LocalProject(
            id="1",
            title="Portfolio CMS",
            description="Single-file portfolio with projects and a markdown blog",
            lang="JavaScript",
            live="",
            repo="",
        ),
        LocalProject(
            id="2",
            title="Weather CLI",
            description="Command-line forecasts with caching and colour output",
            lang="Python",
            live="",
            repo="",
        ),
    ]


def sample_posts() -> list[LocalPost]:
    return [
        LocalPost(
            id="1",
            title="Hello, world",
            content="# Hello\n\nThis workspace stores projects and posts locally. "
                    "Edit or delete this post to get started.",
        ),
    ]


class LocalCMS:
    """
    Project and post management over a key-value storage.

    Every mutation reads the current list, changes it and writes it back.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    # -------------------------------------------------------------------------
    # Theme
    # -------------------------------------------------------------------------

    @property
    def dark(self) -> bool:
        return bool(self.storage.get(THEME_KEY, False))

    def set_dark(self, dark: bool) -> None:
        self.storage.set(THEME_KEY, bool(dark))

    def toggle_theme(self) -> bool:
        """Flip the dark-mode flag and return the new value."""
        dark = not self.dark
        self.set_dark(dark)
        return dark

    # -------------------------------------------------------------------------
    # Projects
    # -------------------------------------------------------------------------

    def projects(self) -> list[LocalProject]:
        """All projects, storing the samples when none have been stored yet."""
        raw = self.storage.get(PROJECTS_KEY)
        if raw is None:
            projects = sample_projects()
            self._save_projects(projects)
            return projects

        try:
            return [LocalProject.model_validate(item) for item in raw]
        except (TypeError, ValidationError) as e:
            logger.warning(f"Stored projects are invalid, using samples: {e}")
            return sample_projects()

    def _save_projects(self, projects: list[LocalProject]) -> None:
        self.storage.set(PROJECTS_KEY, [p.model_dump() for p in projects])

    def upsert_project(self, project: LocalProject) -> LocalProject:
        """
        Save a project.

        A project without an id gets a timestamp id and goes first in the
        list. A project with an id replaces the stored project with that id
        in place; an unknown id leaves the list unchanged.
        """
        projects = self.projects()

        if not project.id:
            project = project.model_copy(update={"id": timestamp_id()})
            projects.insert(0, project)
        else:
            projects = [project if p.id == project.id else p for p in projects]

        self._save_projects(projects)
        return project

    def remove_project(self, project_id: str) -> None:
        self._save_projects([p for p in self.projects() if p.id != project_id])

    def languages(self) -> list[str]:
        """["All"] followed by each distinct project language in list order."""
        seen: list[str] = []
        for project in self.projects():
            if project.lang not in seen:
                seen.append(project.lang)
        return [ALL_LANGUAGES, *seen]

    def filter_projects(self, query: str = "", lang: str = ALL_LANGUAGES) -> list[LocalProject]:
        """
        Projects matching lang whose title or description contains query
        (case-insensitive).
        """
        needle = query.lower()
        return [
            p for p in self.projects()
            if (lang == ALL_LANGUAGES or p.lang == lang)
            and (needle in p.title.lower() or needle in p.description.lower())
        ]

    # -------------------------------------------------------------------------
    # Posts
    # -------------------------------------------------------------------------

    def posts(self) -> list[LocalPost]:
        """All posts, storing the sample when none have been stored yet."""
        raw = self.storage.get(POSTS_KEY)
        if raw is None:
            posts = sample_posts()
            self._save_posts(posts)
            return posts

        try:
            return [LocalPost.model_validate(item) for item in raw]
        except (TypeError, ValidationError) as e:
            logger.warning(f"Stored posts are invalid, using samples: {e}")
            return sample_posts()

    def _save_posts(self, posts: list[LocalPost]) -> None:
        self.storage.set(POSTS_KEY, [p.model_dump() for p in posts])

    def upsert_post(self, post: LocalPost) -> LocalPost:
        """Save a post; same id rules as upsert_project."""
        posts = self.posts()

        if not post.id:
            post = post.model_copy(update={"id": timestamp_id()})
            posts.insert(0, post)
        else:
            posts = [post if p.id == post.id else p for p in posts]

        self._save_posts(posts)
        return post

    def remove_post(self, post_id: str) -> None:
        self._save_posts([p for p in self.posts() if p.id != post_id])

    @staticmethod
    def preview(post: LocalPost, length: int = PREVIEW_LENGTH) -> str:
        """First `length` characters of the content, with "..." if cut."""
        content = post.content
        if len(content) > length:
            return content[:length] + "..."
        return content
