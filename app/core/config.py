"""
Application configuration using Pydantic Settings
"""

from typing import List, Union
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Settings
    api_title: str = "UGC Ad Studio API"
    api_description: str = (
        "Generate UGC-style ad videos from a script, an avatar image and a voice"
    )
    api_version: str = "1.0.0"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # CORS Settings
    cors_origins: Union[List[str], str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: list = ["GET", "POST"]
    cors_allow_headers: list = ["*"]

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string to list.

        Args:
            v: Can be either a list of origins or a comma-separated string.
               If "*" is provided, allows all origins.

        Returns:
            List[str]: List of allowed origins

        Example:
            >>> parse_cors_origins("http://localhost:3000,http://localhost:8080")
            ['http://localhost:3000', 'http://localhost:8080']
            >>> parse_cors_origins("*")
            ['*']
        """
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: str = "data/app.log"

    # Upstream HTTP Settings
    upstream_timeout: int = 60  # seconds per provider request

    # Text generation (Groq, OpenAI-compatible chat completions)
    groq_api_key: str = ""
    groq_api_url: str = "https://api.groq.com/openai/v1/chat/completions"
    groq_model: str = "llama3-8b-8192"
    script_prompt_template: str = "Write a short UGC ad script for {product}"

    # Speech synthesis (ElevenLabs)
    eleven_api_key: str = ""
    eleven_api_url: str = "https://api.elevenlabs.io/v1/text-to-speech"
    eleven_voice_id: str = "EXAVITQu4vr4xnSDxMaL"
    eleven_stability: float = 0.5
    eleven_similarity_boost: float = 0.5

    # Talking-avatar video (D-ID talks)
    did_api_key: str = ""
    did_api_url: str = "https://api.d-id.com/talks"
    did_voice_provider: str = "microsoft"
    default_voice_id: str = "en-US-JennyNeural"

    # Render polling policy
    video_poll_max_attempts: int = 15
    video_poll_interval: float = 2.0  # seconds before each status fetch
    video_poll_backoff_factor: float = 1.0  # 1.0 = fixed delay
    video_poll_max_interval: float = 10.0

    # Avatar assets are fetched by the video provider from this deployment
    avatar_base_url: str = "https://ai-ugcvideo.vercel.app/"

    # Client Settings
    client_api_base_url: str = "http://localhost:8000/api/v1"
    client_request_timeout: int = 120  # must outlast the render poll budget

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def provider_keys_configured(self) -> dict:
        """Which upstream credentials are present (never the values)."""
        return {
            "groq": bool(self.groq_api_key),
            "elevenlabs": bool(self.eleven_api_key),
            "d-id": bool(self.did_api_key),
        }


# Global settings instance
settings = Settings()
