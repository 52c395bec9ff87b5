"""play settings models"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOCAL_HOSTS = ("", "0.0.0.0", "127.0.0.1", "::", "::1", "localhost")

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class AppModel(BaseModel):
    """Defaults for every run, overridable through PLAY_* environment variables."""

    speed: float = Field(
        default=1.0, gt=0, allow_inf_nan=False, description="Playback speed multiplier"
    )
    port: int = Field(default=9876, ge=1, le=65535, description="Port to listen on")
    host: str = Field(default="127.0.0.1", description="Interface to bind to")
    open_browser: bool = Field(
        default=True, description="Open the default browser once the server is up"
    )
    log_level: LogLevel = Field(default="INFO", description="Minimum log level")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class RunConfiguration(AppModel):
    """Immutable startup parameters for a single run."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Absolute path of the media file to serve")

    @field_validator("path", mode="before")
    @classmethod
    def resolve_path(cls, v):
        return Path(v).expanduser().resolve()

    @property
    def url(self) -> str:
        if self.host in LOCAL_HOSTS:
            host = "localhost"
        elif ":" in self.host:
            host = f"[{self.host}]"  # IPv6 literal
        else:
            host = self.host
        return f"http://{host}:{self.port}"
