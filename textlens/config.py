"""Configuration management for textlens."""

import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration with environment variable support."""
    
    # Logging
    log_level: str = Field(default="WARNING")
    
    # Detection
    # Only this many leading tokens are scored
    detection_max_tokens: int = Field(default=50, ge=1, le=10000)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            detection_max_tokens=int(os.getenv("DETECTION_MAX_TOKENS", "50")),
        )


# Global config instance
config = Config.from_env()

import logging
logger = logging.getLogger(__name__)
logger.debug(f"Configuration loaded: LOG_LEVEL={config.log_level}, DETECTION_MAX_TOKENS={config.detection_max_tokens}")
