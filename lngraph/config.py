from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LNGRAPH_",
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Encoding ─────────────────────────────────────────
    json_indent: int | None = Field(
        default=None,
        ge=0,
        description="Default indentation for encode(); None writes compact JSON",
    )


settings = Settings()
