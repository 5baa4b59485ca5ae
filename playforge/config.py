"""Runtime configuration read from the environment (and a local ``.env``)."""

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, model_validator

from playforge.services.prompts import SYSTEM_PROMPT

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or unusable."""


class Settings(BaseModel):
    openai_api_key: str = Field(min_length=1)
    openai_base_url: Optional[str] = None
    model: str = "gpt-5-mini"
    openai_timeout: float = Field(default=300.0, gt=0)
    content_dir: Path = Path("outputs")
    system_prompt_file: Optional[Path] = None
    system_prompt_text: str = SYSTEM_PROMPT
    """Prompt sent with every request; replaced by the file contents when a file is set."""
    auto_slug: bool = False
    """Save every generation under a random slug when the caller gives none."""
    substitute_image_placeholder: bool = True
    """Replace ``{{IMAGE_URL}}`` in the generated HTML with the uploaded data URL."""
    image_placeholder_hint: bool = True
    """Tell the model to use ``{{IMAGE_URL}}`` when an image is attached."""
    page_render_mode: Literal["frame", "raw"] = "frame"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``os.environ``.

        Raises:
            ConfigError: if ``OPENAI_API_KEY`` is missing or blank, or the
                system prompt file cannot be read.
        """
        load_dotenv(find_dotenv(usecwd=True))
        api_key = os.getenv("OPENAI_API_KEY", "").strip()
        if not api_key:
            raise ConfigError("OPENAI_API_KEY is not set. Put it in the environment or .env")

        values = {
            "openai_api_key": api_key,
            "openai_base_url": os.getenv("OPENAI_BASE_URL") or None,
            "system_prompt_file": os.getenv("PLAYFORGE_SYSTEM_PROMPT_FILE") or None,
            "auto_slug": _env_flag("PLAYFORGE_AUTO_SLUG", False),
            "substitute_image_placeholder": _env_flag("PLAYFORGE_SUBSTITUTE_IMAGE", True),
            "image_placeholder_hint": _env_flag("PLAYFORGE_IMAGE_HINT", True),
        }
        for env_name, field in (
            ("PLAYFORGE_MODEL", "model"),
            ("PLAYFORGE_OPENAI_TIMEOUT", "openai_timeout"),
            ("PLAYFORGE_CONTENT_DIR", "content_dir"),
            ("PLAYFORGE_PAGE_MODE", "page_render_mode"),
            ("PLAYFORGE_LOG_LEVEL", "log_level"),
        ):
            raw = os.getenv(env_name)
            if raw:
                values[field] = raw.strip()
        return cls(**values)

    @model_validator(mode="after")
    def _load_system_prompt(self) -> "Settings":
        """Read the prompt file once so a bad path stops start-up, not a request."""
        if self.system_prompt_file is None:
            return self
        try:
            text = self.system_prompt_file.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(
                f"PLAYFORGE_SYSTEM_PROMPT_FILE cannot be read: {self.system_prompt_file} ({exc})"
            ) from exc
        if not text:
            raise ConfigError(f"PLAYFORGE_SYSTEM_PROMPT_FILE is empty: {self.system_prompt_file}")
        self.system_prompt_text = text
        return self


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES
