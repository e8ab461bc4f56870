"""
Application configuration management
"""
from typing import List, Annotated
from pydantic import Field, BeforeValidator
from pydantic_settings import BaseSettings, NoDecode
from dotenv import load_dotenv

load_dotenv()


def parse_comma_separated_str(value: any) -> List[str]:
    if isinstance(value, str):
        if not value:
            return []
        return [item.strip() for item in value.split(',') if item.strip()]
    if isinstance(value, list):
        return value
    return []


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App settings
    app_name: str = "Kids Learning AI"
    app_version: str = "1.0.0"
    debug: bool = Field(False, description="Expose error details in responses")

    # Server settings
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(5000, description="Listening port")

    # Groq completion service
    groq_api_key: str = Field(..., description="Groq API key")
    groq_model: str = Field("llama-3.1-8b-instant", description="Chat completion model")
    temperature: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature")

    # Content generation
    translation_language: str = Field("Telugu", description="Target language for /translate")
    strict_output_validation: bool = Field(
        False,
        description="Check parsed quiz/math output against the documented shapes"
    )

    # Security
    cors_origins: Annotated[List[str], NoDecode, BeforeValidator(parse_comma_separated_str)] = Field(
        default=["*"],
        description="Allowed CORS origins, comma separated"
    )

    # Logging
    log_level: str = Field("INFO", description="Log level")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }


# Global settings instance
settings = Settings()
