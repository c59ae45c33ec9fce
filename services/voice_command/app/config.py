"""Configuration settings for Voice Command service"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Server
    port: int = 8009
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Redis bridge to the speech pipeline
    redis_url: str = "redis://redis:6379"
    redis_enabled: bool = True
    transcript_channel: str = "asr_results"
    event_channel: str = "voice_command_events"

    # Command language
    default_command_locale: str = "en-IN"

    # Processing flag debounce (not a completion signal)
    processing_debounce_ms: int = 300

    # Response composition limits
    read_full_preview_chars: int = 500
    max_key_information: int = 5
    max_suggested_actions: int = 3
    max_warnings: int = 3

    # Session management
    session_timeout: int = 1800  # 30 minutes
    session_cleanup_interval: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VOICE_COMMAND_",
        case_sensitive=False,
    )


settings = Settings()
