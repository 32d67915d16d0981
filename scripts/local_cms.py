#!/usr/bin/env python3
# =============================================================================
# scripts/local_cms.py - Local CMS Workspace CLI
# =============================================================================
# Manage projects and posts kept in a local key-value file, no server needed.
#
# Usage:
#   python scripts/local_cms.py projects [--query api] [--lang Python]
#   python scripts/local_cms.py add-project "Weather CLI" --lang Python --description "..."
#   python scripts/local_cms.py edit-project 1718035200123 --title "New title"
#   python scripts/local_cms.py remove-project 1718035200123
#   python scripts/local_cms.py posts
#   python scripts/local_cms.py add-post "Hello" --content "# Hi"
#   python scripts/local_cms.py remove-post 1718035200123
#   python scripts/local_cms.py theme [--toggle]
#
# The storage file defaults to LOCAL_CMS_PATH (local_cms.json); override with
# --file.
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError

from app.config import settings
from core.models import LocalPost, LocalProject
from core.services.local_cms import ALL_LANGUAGES, LocalCMS
from lib.local_storage import KeyValueStorage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Local portfolio CMS")
    parser.add_argument("--file", default=settings.LOCAL_CMS_PATH, help="Storage file")
    commands = parser.add_subparsers(dest="command", required=True)

    projects = commands.add_parser("projects", help="List projects")
    projects.add_argument("--query", default="", help="Search title and description")
    projects.add_argument("--lang", default=ALL_LANGUAGES, help="Filter by language")

    add_project = commands.add_parser("add-project", help="Add a project")
    add_project.add_argument("title")
    add_project.add_argument("--description", default="")
    add_project.add_argument("--lang", default="JavaScript")
    add_project.add_argument("--live", default="")
    add_project.add_argument("--repo", default="")

    edit_project = commands.add_parser("edit-project", help="Edit a project")
    edit_project.add_argument("id")
    edit_project.add_argument("--title")
    edit_project.add_argument("--description")
    edit_project.add_argument("--lang")
    edit_project.add_argument("--live")
    edit_project.add_argument("--repo")

    remove_project = commands.add_parser("remove-project", help="Delete a project")
    remove_project.add_argument("id")

    commands.add_parser("posts", help="List posts with a preview")

    add_post = commands.add_parser("add-post", help="Add a post")
    add_post.add_argument("title")
    add_post.add_argument("--content", default="")

    edit_post = commands.add_parser("edit-post", help="Edit a post")
    edit_post.add_argument("id")
    edit_post.add_argument("--title")
    edit_post.add_argument("--content")

    remove_post = commands.add_parser("remove-post", help="Delete a post")
    remove_post.add_argument("id")

    theme = commands.add_parser("theme", help="Show or toggle dark mode")
    theme.add_argument("--toggle", action="store_true")

    return parser


def _changes(args: argparse.Namespace, fields: tuple[str, ...]) -> dict:
    return {f: getattr(args, f) for f in fields if getattr(args, f) is not None}


def run(args: argparse.Namespace, cms: LocalCMS) -> int:
    """Execute one command. Returns the process exit code."""
    if args.command == "projects":
        print(f"Languages: {', '.join(cms.languages())}")
        found = cms.filter_projects(args.query, args.lang)
        if not found:
            print("No projects. Add your first project.")
        for p in found:
            print(f"[{p.id}] {p.title} ({p.lang})")
            if p.description:
                print(f"    {p.description}")
        return 0

    if args.command == "add-project":
        project = cms.upsert_project(LocalProject(
            title=args.title,
            description=args.description,
            lang=args.lang,
            live=args.live,
            repo=args.repo,
        ))
        print(f"Added project {project.id}")
        return 0

    if args.command == "edit-project":
        current = next((p for p in cms.projects() if p.id == args.id), None)
        if current is None:
            print(f"No project with id {args.id}", file=sys.stderr)
            return 1
        fields = ("title", "description", "lang", "live", "repo")
        cms.upsert_project(LocalProject.model_validate(
            {**current.model_dump(), **_changes(args, fields)}
        ))
        print(f"Updated project {args.id}")
        return 0

    if args.command == "remove-project":
        cms.remove_project(args.id)
        print(f"Removed project {args.id}")
        return 0

    if args.command == "posts":
        for post in cms.posts():
            print(f"[{post.id}] {post.title}  {post.created_at}")
            print(f"    {cms.preview(post)}")
        return 0

    if args.command == "add-post":
        post = cms.upsert_post(LocalPost(title=args.title, content=args.content))
        print(f"Added post {post.id}")
        return 0

    if args.command == "edit-post":
        current = next((p for p in cms.posts() if p.id == args.id), None)
        if current is None:
            print(f"No post with id {args.id}", file=sys.stderr)
            return 1
        cms.upsert_post(LocalPost.model_validate(
            {**current.model_dump(), **_changes(args, ("title", "content"))}
        ))
        print(f"Updated post {args.id}")
        return 0

    if args.command == "remove-post":
        cms.remove_post(args.id)
        print(f"Removed post {args.id}")
        return 0

    if args.command == "theme":
        dark = cms.toggle_theme() if args.toggle else cms.dark
        print("dark" if dark else "light")
        return 0

    return 2


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cms = LocalCMS(KeyValueStorage(args.file))
    try:
        return run(args, cms)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        print(f"Invalid value for: {fields}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
