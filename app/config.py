"""Application settings loaded from environment variables."""

from pathlib import Path
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Listener
    host: str = "0.0.0.0"
    port: int = 3000

    # Built single-page application
    static_dir: Path = BASE_DIR / "dist"
    index_file: str = "index.html"

    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_ignore_empty = True
        frozen = True

    @property
    def index_path(self) -> Path:
        """Fallback document served for every unmatched route."""
        return self.static_dir / self.index_file
