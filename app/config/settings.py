"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class StorageBackend(str, Enum):
    """Where translation history is kept"""
    MEMORY = "memory"
    DATABASE = "database"


class TranslatorSettings(BaseSettings):
    """External translation API used when the lexicon has no match"""

    enabled: bool = Field(default=True)
    api_key: Optional[str] = Field(
        default=None,
        description="Google Cloud Translation API key; the public endpoint is used when unset"
    )
    api_url: str = Field(default="https://translation.googleapis.com/language/translate/v2")
    public_api_url: str = Field(default="https://translate.googleapis.com/translate_a/single")
    source_hint: str = Field(default="hi", description="Closest supported language to Banjara")
    timeout_seconds: float = Field(default=4.0, ge=1.0, le=10.0)

    model_config = {"env_prefix": "TRANSLATOR_"}


class SpeechSettings(BaseSettings):
    """Text-to-speech proxy configuration"""

    enabled: bool = Field(default=True)
    api_url: str = Field(default="https://translate.google.com/translate_tts")
    timeout_seconds: float = Field(default=5.0, ge=1.0, le=30.0)
    max_text_length: int = Field(default=200, ge=1, le=1000)

    model_config = {"env_prefix": "TTS_"}


class StorageSettings(BaseSettings):
    """Translation history storage configuration"""

    backend: StorageBackend = Field(default=StorageBackend.MEMORY)
    database_url: str = Field(default="sqlite:///./translations.db")
    history_limit: int = Field(default=10, ge=1, le=100)

    @field_validator('backend', mode='before')
    @classmethod
    def normalize_backend(cls, v):
        """Accept backend names in any case"""
        if isinstance(v, str):
            return StorageBackend(v.lower())
        return v

    model_config = {"env_prefix": "STORAGE_"}


class LexiconSettings(BaseSettings):
    """Banjara dictionary configuration"""

    path: Optional[str] = Field(
        default=None,
        description="JSON file replacing the built-in dictionary"
    )

    model_config = {"env_prefix": "LEXICON_"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Banjara Translator")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")
    log_file: Optional[str] = Field(default=None)

    # Nested Settings
    translator: TranslatorSettings = Field(default_factory=TranslatorSettings)
    speech: SpeechSettings = Field(default_factory=SpeechSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    lexicon: LexiconSettings = Field(default_factory=LexiconSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
