from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import API_BASE
from ..core.errors import ConfigError

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="", env_file=None, extra="ignore")

    github_username: str | None = None
    github_token: str | None = None
    repo_dir: str | None = None
    api_base: str = Field(default=API_BASE, validation_alias="GITHUB_API_BASE")
    bare: bool = Field(default=True, validation_alias="MIRROR_BARE")

    def require(self, dest: bool = True) -> Settings:
        """Fail with ConfigError unless username, token and (if `dest`) target directory are set."""
        required = [("GITHUB_USERNAME", self.github_username), ("GITHUB_TOKEN", self.github_token)]
        if dest:
            required.append(("REPO_DIR", self.repo_dir))
        missing = [env for env, value in required if not value]
        if missing:
            raise ConfigError(f"missing required setting(s): {', '.join(missing)}")
        return self


def get_settings(**overrides) -> Settings:
    """Build settings from the environment; non-None keyword overrides win (CLI flags)."""
    s = Settings()
    updates = {k: v for k, v in overrides.items() if v is not None}
    return s.model_copy(update=updates) if updates else s
