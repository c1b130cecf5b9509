from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    app_name: str = "RadioLens Diagnosis Service"
    api_version: str = "1.0.0"
    debug: bool = False

    # Inference Service Settings
    api_key: str = ""  # From API_KEY env var, empty disables analysis
    inference_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    verification_model: str = "gemini-2.5-flash"
    diagnosis_model: str = "gemini-2.5-flash"
    verification_reasoning_effort: str = "none"  # body part check needs no thinking

    # Upload Settings
    max_upload_size: int = 10 * 1024 * 1024  # 10MB

    # Logging Settings
    log_dir: str = "/tmp/radiolens/api_logs"
    log_level: str = "INFO"
    log_rotation_interval: str = "midnight"  # daily rotation at midnight
    log_rotation_count: int = 30  # keep 30 days of logs
    log_max_bytes: int = 10 * 1024 * 1024  # 10MB for error log
    log_backup_count: int = 5  # keep 5 backup files for error log

    @property
    def is_configured(self) -> bool:
        """Whether a credential for the inference service is present"""
        return bool(self.api_key.strip())

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
