# =============================================================================
# app/rendering.py - HTML Page Rendering
# =============================================================================
# Turns data into complete HTML documents:
# - render_page(): wraps a body fragment in the site layout
# - render_home(), render_post(), ...: build the body fragments
# - markdown_to_html(): a small, lossy markdown subset for post content
#
# Templates live in app/templates/ and are rendered with Jinja2 autoescaping,
# so every interpolated value is HTML-escaped unless it is explicitly Markup.
# =============================================================================

import re
from collections.abc import Iterable, Sequence
from datetime import datetime
from pathlib import Path
from urllib.parse import urlparse

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from app.config import settings
from core.models import Message, Post, PostSummary, Project

TEMPLATES_DIR = Path(__file__).parent / "templates"

environment = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(default=True, default_for_string=True),
    trim_blocks=True,
    lstrip_blocks=True,
)

# Notices shown on the dashboard for the ?msg= flag set by admin redirects
DASHBOARD_NOTICES = {
    "ok": "Post saved.",
    "deleted": "Deleted.",
    "missing": "Please fill in all required fields.",
    "invalid": "Some fields were not valid.",
    "error": "Something went wrong while saving. Check the server log.",
}

SAFE_LINK_SCHEMES = {"", "http", "https", "mailto"}


# =============================================================================
# Escaping & Markdown
# =============================================================================

def escape_html(value: object) -> str:
    """Escape &, <, >, " and ' in value. None becomes an empty string."""
    if value is None:
        return ""
    return str(escape(value))


_HEADING_PATTERNS = (
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
)
_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_LINK = re.compile(r"\[(.*?)\]\((.*?)\)")
_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n+")
_HEADING_BLOCK = re.compile(r"^<h[1-3]>.*</h[1-3]>$")


def _link(match: re.Match) -> str:
    text, href = match.group(1), match.group(2).strip()
    # href is already escaped; only the scheme needs checking
    if urlparse(href).scheme.lower() not in SAFE_LINK_SCHEMES:
        return text
    return f'<a href="{href}" target="_blank" rel="noopener noreferrer">{text}</a>'


def markdown_to_html(text: str | None) -> Markup:
    """
    Convert a small markdown subset to HTML.

    Supported: "#", "##" and "###" headings at line start, **bold**,
    *italic*, [text](url) links, blank-line paragraph breaks and
    single-newline line breaks. The input is escaped first, so raw HTML in
    the source is shown as text.

    Args:
        text: Markdown source (may be None)

    Returns:
        Markup safe to embed in a template
    """
    if not text:
        return Markup("")

    out = escape_html(text.replace("\r\n", "\n"))
    for pattern, replacement in _HEADING_PATTERNS:
        out = pattern.sub(replacement, out)
    out = _BOLD.sub(r"<strong>\1</strong>", out)
    out = _ITALIC.sub(r"<em>\1</em>", out)
    out = _LINK.sub(_link, out)

    blocks = []
    for block in _PARAGRAPH_BREAK.split(out.strip()):
        block = block.strip()
        if not block:
            continue
        if _HEADING_BLOCK.match(block):
            blocks.append(block)
        else:
            lines = block.replace("\n", "<br/>")
            blocks.append(f"<p>{lines}</p>")

    return Markup("".join(blocks))


environment.filters["markdown"] = markdown_to_html


# =============================================================================
# Layout
# =============================================================================

def render_page(title: str, body_html: str, owner: str | None = None) -> str:
    """
    Wrap a body fragment in the full site layout.

    Args:
        title: Page title (escaped)
        body_html: Trusted HTML fragment produced by one of the render_*
            functions below
        owner: Site owner name; defaults to SITE_OWNER

    Returns:
        A complete HTML document
    """
    return environment.get_template("page.html").render(
        title=title,
        body=Markup(body_html),
        owner=owner or settings.SITE_OWNER,
        tagline=settings.SITE_TAGLINE,
        year=datetime.now().year,
    )


def _fragment(template: str, **context) -> str:
    return environment.get_template(template).render(**context)


# =============================================================================
# Page Bodies
# =============================================================================

def render_home(
    projects: Iterable[Project],
    posts: Sequence[PostSummary],
    is_admin: bool = False,
) -> str:
    """Hero, projects grid, blog list and contact form."""
    return _fragment(
        "home.html",
        projects=list(projects),
        posts=posts,
        is_admin=is_admin,
        owner=settings.SITE_OWNER,
    )


def render_post(post: Post) -> str:
    """A single post with its markdown content rendered."""
    return _fragment("post.html", post=post)


def render_not_found(what: str = "Post") -> str:
    return _fragment("not_found.html", what=what)


def render_admin_login(error: str | None = None) -> str:
    """Login form, with an invalid-credentials notice when error is set."""
    return _fragment("admin_login.html", error=bool(error))


def render_admin_dashboard(
    messages: Sequence[Message],
    posts: Sequence[PostSummary],
    admin_email: str = "",
    msg: str | None = None,
) -> str:
    """Messages with delete buttons, post editor and post list."""
    return _fragment(
        "admin_dashboard.html",
        messages=messages,
        posts=posts,
        admin_email=admin_email,
        notice=DASHBOARD_NOTICES.get(msg or ""),
        notice_is_error=msg in ("missing", "invalid", "error"),
    )
