from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List, Optional
from pathlib import Path

# Get the directory where config.py is located
BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    model_config = ConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"
    analysis_max_tokens: int = 300
    analysis_temperature: float = 0.7
    image_detail: str = "high"
    request_timeout_seconds: float = 60.0
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

settings = Settings()
