"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_COLUMNS = "Backlog,To Do,In Progress,Testing,Completed"


class Settings(BaseSettings):
    """Application settings."""

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding one JSON file per board",
    )

    default_columns: str = Field(
        default=DEFAULT_COLUMNS,
        description="Comma-separated column names given to new boards",
    )

    host: str = Field(default="127.0.0.1", description="Interface to bind")

    port: int = Field(default=5043, description="Port to listen on")

    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "KARTAO_",
    }

    @property
    def column_names(self) -> list[str]:
        """Default column names, in order, with blanks dropped."""
        return [name.strip() for name in self.default_columns.split(",") if name.strip()]
