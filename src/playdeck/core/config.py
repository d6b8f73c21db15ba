"""Player settings, read from the environment."""

import os
from pathlib import Path
from pydantic import BaseModel, Field

DEFAULT_PROJECTS_DIR = "./projects"
DEFAULT_MAX_CHAIN = 1000
DEFAULT_HISTORY_LIMIT = 50
DEFAULT_LOG_LEVEL = "INFO"


class PlayerSettings(BaseModel):
    """Tunables for the playback engine and the MCP host."""
    projects_dir: Path = Path(DEFAULT_PROJECTS_DIR)
    # Upper bound on action lists run for one external event
    max_chain: int = Field(default=DEFAULT_MAX_CHAIN, gt=0)
    history_limit: int = Field(default=DEFAULT_HISTORY_LIMIT, ge=0)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "PlayerSettings":
        return cls(
            projects_dir=Path(os.getenv("PLAYDECK_PROJECTS_DIR", DEFAULT_PROJECTS_DIR)),
            max_chain=int(os.getenv("PLAYDECK_MAX_CHAIN", DEFAULT_MAX_CHAIN)),
            history_limit=int(os.getenv("PLAYDECK_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)),
            log_level=os.getenv("PLAYDECK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
