# =============================================================================
# core/models/project.py - Portfolio Project Schemas
# =============================================================================
# Projects shown on the server home page are defined in code, not stored.
# Edit DEFAULT_PROJECTS to change what the home page shows.
# =============================================================================

from pydantic import BaseModel, Field


class Project(BaseModel):
    """A portfolio project card."""

    id: int
    title: str
    description: str
    tech: list[str] = Field(default_factory=list)


DEFAULT_PROJECTS: tuple[Project, ...] = (
    Project(
        id=1,
        title="Portfolio Website",
        description="Responsive portfolio with contact form and blog",
        tech=["HTML", "CSS", "Python"],
    ),
    Project(
        id=2,
        title="API Backend",
        description="FastAPI + SQLite backend for small apps",
        tech=["Python", "FastAPI", "SQLite"],
    ),
)
