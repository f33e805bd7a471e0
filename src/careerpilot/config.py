"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google Gemini (https://aistudio.google.com/apikey)
    # Left empty on purpose: a missing key surfaces at first generation, not at startup
    gemini_api_key: str = ""

    # LLM Configuration
    llm_provider: str = "gemini"
    llm_model: str = ""  # Empty = use provider default
    llm_temperature: float = 0.7
    thinking_budget: int = 0  # 0 disables thinking on flash models

    # Share links
    app_url: str = "http://localhost:3000/"
    share_param: str = "share"

    # Local storage
    data_dir_name: str = ".careerpilot"
    storage_filename: str = "storage.json"
    log_filename: str = "careerpilot.log"

    @property
    def data_dir(self) -> Path:
        """Get the per-user data directory."""
        return Path.home() / self.data_dir_name

    @property
    def storage_path(self) -> Path:
        """Get the path of the persisted session storage file."""
        return self.data_dir / self.storage_filename

    @property
    def log_path(self) -> Path:
        """Get the path of the debug log file."""
        return self.data_dir / self.log_filename

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
