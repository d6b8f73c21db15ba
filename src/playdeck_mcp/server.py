"""PlayDeck MCP Server - validate and play interactive slide projects."""

from mcp.server.fastmcp import FastMCP, Context
import json
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Any, Optional

# SDK imports
from playdeck.core.config import PlayerSettings
from playdeck.core.project import Project
from playdeck.core.serializer import FormatError
from playdeck.core.validator import validate
from playdeck.core.workspace import ProjectWorkspace, new_project
from playdeck.runtime import PlaybackController, PlaybackError

_settings = PlayerSettings.from_env()

# Configure logging
logging.basicConfig(level=getattr(logging, _settings.log_level, logging.INFO),
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("PlayDeckMCP")


# ── Global State ────────────────────────────────────────────────────────

_workspace = ProjectWorkspace(root_path=_settings.projects_dir)
_project: Optional[Project] = None
_project_file: Optional[str] = None
_controller = PlaybackController(settings=_settings)


def _errors_payload(errors) -> list[dict]:
    return [
        {"kind": e.kind, "ref_id": e.ref_id, "trigger_id": e.trigger_id, "message": str(e)}
        for e in errors
    ]


def _playback_payload() -> dict:
    return _controller.snapshot().model_dump(mode="json")


# ── Server Setup ────────────────────────────────────────────────────────

@asynccontextmanager
async def server_lifespan(server: FastMCP) -> AsyncIterator[Dict[str, Any]]:
    try:
        logger.info(f"PlayDeckMCP server starting up (projects in {_workspace.root_path})")
        yield {}
    finally:
        _controller.stop()
        logger.info("PlayDeckMCP server shut down")


mcp = FastMCP("PlayDeckMCP", lifespan=server_lifespan)


# ═══════════════════════════════════════════════════════════════════════
# PROJECT TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def create_project(ctx: Context, name: str, author: str = "") -> str:
    """Create a new project with one slide and a base layer, and save it.

    Parameters:
    - name: Project name
    - author: Optional author name
    """
    global _project, _project_file
    if not name.strip():
        return "Error: Project name cannot be empty."
    project = new_project(name, author=author or None)
    path = _workspace.save(project)
    _project, _project_file = project, path.name
    return json.dumps({
        "status": "created",
        "file": path.name,
        "project": project.to_summary(),
    }, indent=2)


@mcp.tool()
def open_project(ctx: Context, file_name: str) -> str:
    """Open a project document from the projects directory.

    Parameters:
    - file_name: Document name, with or without the .json suffix
    """
    global _project, _project_file
    try:
        project = _workspace.open(file_name)
    except FormatError as e:
        return f"Error: Could not read project: {str(e)}"
    if project is None:
        return f"Error: Project file '{file_name}' not found."
    _project, _project_file = project, _workspace.path_for(file_name).name
    return json.dumps({
        "status": "opened",
        "file": _project_file,
        "project": project.to_summary(),
        "diagnostics": validate(project),
    }, indent=2)


@mcp.tool()
def list_projects(ctx: Context) -> str:
    """List the project documents in the projects directory."""
    return json.dumps(_workspace.list_projects(), indent=2)


@mcp.tool()
def save_project(ctx: Context) -> str:
    """Save the open project back to its document."""
    if _project is None:
        return "Error: No project is open. Use create_project or open_project first."
    path = _workspace.save(_project, _project_file)
    return f"Project '{_project.name}' saved to {path.name}."


@mcp.tool()
def validate_project(ctx: Context) -> str:
    """Run the validator on the open project and list every diagnostic."""
    if _project is None:
        return "Error: No project is open. Use create_project or open_project first."
    diagnostics = validate(_project)
    return json.dumps({
        "playable": not diagnostics,
        "diagnostics": diagnostics,
    }, indent=2)


# ═══════════════════════════════════════════════════════════════════════
# PLAYBACK TOOLS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def start_playback(ctx: Context) -> str:
    """Validate the open project and start playing it from the first slide."""
    if _project is None:
        return "Error: No project is open. Use create_project or open_project first."
    diagnostics = validate(_project)
    if diagnostics:
        return json.dumps({"status": "blocked", "diagnostics": diagnostics}, indent=2)
    try:
        errors = _controller.load_project(_project)
    except PlaybackError as e:
        logger.error(f"Playback failed to start: {str(e)}")
        return f"Error: {str(e)}"
    return json.dumps({
        "status": "playing",
        "errors": _errors_payload(errors),
        "playback": _playback_payload(),
    }, indent=2)


@mcp.tool()
def click_object(ctx: Context, object_id: str) -> str:
    """Send a click on an object of the current slide.

    Parameters:
    - object_id: ID of the clicked object
    """
    try:
        errors = _controller.on_object_clicked(object_id)
    except PlaybackError as e:
        logger.error(f"Click on '{object_id}' failed: {str(e)}")
        return f"Error: {str(e)}"
    return json.dumps({
        "errors": _errors_payload(errors),
        "playback": _playback_payload(),
    }, indent=2)


@mcp.tool()
def enter_slide(ctx: Context, slide_id: str) -> str:
    """Re-fire the slide-entry triggers of the current slide.

    Parameters:
    - slide_id: ID of the current slide
    """
    try:
        errors = _controller.on_slide_entered(slide_id)
    except PlaybackError as e:
        return f"Error: {str(e)}"
    return json.dumps({
        "errors": _errors_payload(errors),
        "playback": _playback_payload(),
    }, indent=2)


def _step(direction: str) -> str:
    try:
        if direction == "next":
            errors = _controller.navigate_next()
        else:
            errors = _controller.navigate_previous()
    except PlaybackError as e:
        logger.error(f"Navigation to {direction} slide failed: {str(e)}")
        return f"Error: {str(e)}"
    slide_count = len(_controller.project.slides) if _controller.project else 0
    return json.dumps({
        "errors": _errors_payload(errors),
        "slide_index": _controller.get_current_slide_index(),
        "slide_count": slide_count,
        "playback": _playback_payload(),
    }, indent=2)


@mcp.tool()
def next_slide(ctx: Context) -> str:
    """Go to the next slide in project order. Does nothing on the last slide."""
    return _step("next")


@mcp.tool()
def previous_slide(ctx: Context) -> str:
    """Go to the previous slide in project order. Does nothing on the first slide."""
    return _step("previous")


@mcp.tool()
def get_playback_state(ctx: Context) -> str:
    """Get the current slide, variable values and layer visibility."""
    return json.dumps(_playback_payload(), indent=2)


@mcp.tool()
def get_variable(ctx: Context, variable_id: str) -> str:
    """Read the current value of a variable.

    Parameters:
    - variable_id: ID of the variable
    """
    if not _controller.variables.has(variable_id):
        return f"Error: Variable '{variable_id}' not found."
    return json.dumps({"id": variable_id, "value": _playback_payload()["variables"][variable_id]})


@mcp.tool()
def stop_playback(ctx: Context) -> str:
    """Stop playback and discard all playback state."""
    _controller.stop()
    return "Playback stopped."


@mcp.prompt()
def playdeck_workflow() -> str:
    """Suggested order of tool calls for authoring and testing a project."""
    return """PlayDeck workflow:

1. **Project**: Use create_project() for a blank project or open_project()
   to load an existing document. list_projects() shows what is available.

2. **Check**: Use validate_project() until it reports no diagnostics.
   Duplicate ids, empty triggers and references to missing slides, layers,
   variables or objects all block playback.

3. **Play**: start_playback() enters the first slide and fires its
   slide-entry triggers. click_object() simulates a click;
   next_slide() and previous_slide() step through the slides in order.
   get_playback_state() shows the current slide, variables and layers.

4. **Finish**: stop_playback() discards the session; save_project() writes
   the document back to disk.
"""


# ── Main ────────────────────────────────────────────────────────────────

def main():
    """Run the MCP server"""
    mcp.run()


if __name__ == "__main__":
    main()
