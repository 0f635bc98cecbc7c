"""Core sesh type definitions."""

from pydantic import BaseModel, ConfigDict, Field


class StoredConfiguration(BaseModel):
    """Shape of config.json as read from disk. Both fields may be absent."""

    model_config = ConfigDict(extra="ignore", strict=True)

    paths: list[str] | None = Field(
        default=None, description="Project search directories"
    )
    editor: str | None = Field(default=None, description="Editor command")


class Configuration(BaseModel):
    """Persisted sesh configuration with defaults applied."""

    paths: list[str] = Field(
        default_factory=list,
        description="Absolute project search directories, in insertion order",
    )
    editor: str = Field(description="Shell command opening the editor")
