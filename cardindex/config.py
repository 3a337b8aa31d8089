from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDINDEX_")

    app_name: str = "cardindex"
    debug: bool = False

    # Directory scanned for set.xml files when the CLI gets no arguments
    data_dir: Path = Path(__file__).parent.parent / "data"

    http_timeout: float = 30.0
    user_agent: str = "cardindex/1.0"


settings = Settings()
