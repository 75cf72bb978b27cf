"""Process configuration loaded once from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache

from domain.model.upload import MAX_UPLOAD_BYTES


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration shared by the API and the notification worker."""
    mongo_url: str | None = None
    mongodb_database: str = 'nrbc_church'
    jwt_secret_key: str | None = None
    bcrypt_rounds: int = 12
    redis_url: str | None = None
    smtp_host: str = 'smtp.gmail.com'
    smtp_port: int = 587
    email_user: str | None = None
    email_pass: str | None = None
    email_from: str | None = None
    prayer_email: str | None = None
    contact_email: str | None = None
    upload_dir: str = 'uploads'
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    cors_origins: str = '*'
    notification_max_attempts: int = 5
    log_level: str = 'INFO'
    port: int = 8000

    @classmethod
    def from_env(cls) -> 'Settings':
        email_user = os.getenv('EMAIL_USER')
        return cls(
            mongo_url=os.getenv('MONGODB_URI') or os.getenv('MONGO_URL'),
            mongodb_database=os.getenv('MONGODB_DATABASE', 'nrbc_church'),
            jwt_secret_key=os.getenv('JWT_SECRET_KEY'),
            bcrypt_rounds=_int_env('BCRYPT_ROUNDS', 12),
            redis_url=os.getenv('REDIS_URL'),
            smtp_host=os.getenv('SMTP_HOST', 'smtp.gmail.com'),
            smtp_port=_int_env('SMTP_PORT', 587),
            email_user=email_user,
            email_pass=os.getenv('EMAIL_PASS'),
            email_from=os.getenv('EMAIL_FROM') or email_user,
            prayer_email=os.getenv('PRAYER_EMAIL'),
            contact_email=os.getenv('CONTACT_EMAIL'),
            upload_dir=os.getenv('UPLOAD_DIR', 'uploads'),
            max_upload_bytes=_int_env('MAX_UPLOAD_BYTES', MAX_UPLOAD_BYTES),
            cors_origins=os.getenv('CORS_ORIGINS', '*'),
            notification_max_attempts=_int_env('NOTIFICATION_MAX_ATTEMPTS', 5),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            port=_int_env('PORT', 8000),
        )

    def require_jwt_secret(self) -> str:
        if not self.jwt_secret_key:
            raise ValueError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        return self.jwt_secret_key


@lru_cache
def get_settings() -> Settings:
    """Settings for this process, read from the environment on first use."""
    return Settings.from_env()
