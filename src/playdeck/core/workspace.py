"""Project documents on disk and new-project scaffolding."""

import logging
import re
import uuid
from pathlib import Path
from typing import Optional
from pydantic import BaseModel

from .project import Project
from .serializer import FormatError, load_project_file, save_project_file
from .slides import Layer, Slide

logger = logging.getLogger("PlayDeck.core.workspace")

PROJECT_SUFFIX = ".json"


def new_project(name: str, author: Optional[str] = None) -> Project:
    """Create a project with one default slide holding a visible base layer."""
    project = Project(name=name, author=author)
    slide = Slide(id=str(uuid.uuid4()), title="Slide 1", width=1920, height=1080)
    slide.layers.append(Layer(id=str(uuid.uuid4()), name="Base Layer", visible=True))
    project.add_slide(slide)
    return project


def _slugify(text: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9_-]+", "-", text.strip()).strip("-").lower()
    return slug


class ProjectWorkspace(BaseModel):
    """A directory of project documents, one JSON file per project."""
    root_path: Path

    model_config = {"arbitrary_types_allowed": True}

    def initialize(self) -> "ProjectWorkspace":
        self.root_path.mkdir(parents=True, exist_ok=True)
        return self

    def path_for(self, file_name: str) -> Path:
        """Resolve a document name inside the workspace (no sub-directories)."""
        name = Path(file_name).name
        if not name:
            raise ValueError(f"Invalid project file name: {file_name!r}")
        if not name.endswith(PROJECT_SUFFIX):
            name += PROJECT_SUFFIX
        return self.root_path / name

    def default_file_name(self, project: Project) -> str:
        return (_slugify(project.name) or project.id) + PROJECT_SUFFIX

    def save(self, project: Project, file_name: Optional[str] = None) -> Path:
        """Write the project into the workspace, returning the file path."""
        self.initialize()
        path = self.path_for(file_name or self.default_file_name(project))
        return save_project_file(project, path)

    def open(self, file_name: str) -> Optional[Project]:
        """Load a project. Returns None when the file does not exist.

        A file that exists but does not decode raises FormatError.
        """
        path = self.path_for(file_name)
        if not path.exists():
            return None
        return load_project_file(path)

    def list_projects(self) -> list[dict]:
        """Summaries of every decodable document in the workspace."""
        if not self.root_path.exists():
            return []
        entries = []
        for path in sorted(self.root_path.glob(f"*{PROJECT_SUFFIX}")):
            try:
                project = load_project_file(path)
            except (FormatError, OSError) as e:
                logger.warning(f"Skipping unreadable project file {path.name}: {e}")
                continue
            entries.append({
                "file": path.name,
                "id": project.id,
                "name": project.name,
                "slide_count": len(project.slides),
            })
        return entries
