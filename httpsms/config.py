import logging
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    log_level: str = "INFO"
    log_json: bool = True
    
    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()

def validate_settings(config: Settings = settings):
    """Validate that the configured log level is a known logging level"""
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got {config.log_level!r}")
    return True
