# config/settings.py
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from enum import Enum
import os
from dotenv import load_dotenv

# Load .env file explicitly
load_dotenv()


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def default_kubeconfig_path() -> str:
    """$HOME/.kube/config"""
    return os.path.join(os.environ.get("HOME", ""), ".kube", "config")


class KubernetesSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="K8S_")

    kubeconfig_path: str = Field(default_factory=default_kubeconfig_path, description="Path to kubeconfig file")
    namespace: str = Field("default", description="Namespace the pod is created and listed in")
    context: Optional[str] = Field(None, description="Kubernetes context to use")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: LogLevel = Field(LogLevel.INFO, description="Log level")
    log_config_path: Optional[str] = Field(None, description="YAML logging config; enables JSON log output")

    kubernetes: KubernetesSettings = Field(default_factory=lambda: KubernetesSettings())

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @classmethod
    def create_from_env(cls) -> "Settings":
        """Create settings instance from environment variables."""
        return cls()
