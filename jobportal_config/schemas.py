from datetime import timedelta
from typing import Tuple

from pydantic import BaseModel, ConfigDict

_MB = 1024 * 1024


class Section(BaseModel):
    # records are built once at startup and shared read-only afterwards
    model_config = ConfigDict(frozen=True)


class ServerConfig(Section):
    port: str
    environment: str
    mode: str  # serving mode passed to the HTTP layer (GIN_MODE)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class DatabaseConfig(Section):
    url: str
    max_connections: int
    max_idle_time: timedelta
    max_lifetime: timedelta


class CacheConfig(Section):
    url: str
    password: str
    db_index: int


class TokenAuthConfig(Section):
    secret: str
    expiry: timedelta


def _normalise_ext(ext: str) -> str:
    return ext.strip().lstrip(".").lower()


class StorageConfig(Section):
    endpoint: str
    access_key: str
    secret_key: str
    bucket: str
    use_tls: bool
    max_resume_size_mb: int
    max_image_size_mb: int
    allowed_image_types: Tuple[str, ...]
    allowed_document_types: Tuple[str, ...]

    @property
    def max_resume_size_bytes(self) -> int:
        return self.max_resume_size_mb * _MB

    @property
    def max_image_size_bytes(self) -> int:
        return self.max_image_size_mb * _MB

    def allows_image(self, ext: str) -> bool:
        """True if ``ext`` (".PNG", "png", ...) is an accepted image type."""
        return _normalise_ext(ext) in {_normalise_ext(t) for t in self.allowed_image_types}

    def allows_document(self, ext: str) -> bool:
        return _normalise_ext(ext) in {_normalise_ext(t) for t in self.allowed_document_types}


class MailConfig(Section):
    enabled: bool
    host: str
    port: int
    username: str
    password: str
    from_email: str
    from_name: str


class AppPolicyConfig(Section):
    signup_bonus_points: int
    profile_completion_bonus: int
    referral_bonus_points: int
    max_applications_per_day: int
    featured_job_duration_days: int
    rate_limit_requests_per_minute: int
    rate_limit_burst: int


class SecurityConfig(Section):
    bcrypt_cost: int
    cors_allowed_origins: Tuple[str, ...]


class Config(Section):
    """Complete application configuration, as returned by ``loader.load()``."""

    server: ServerConfig
    database: DatabaseConfig
    cache: CacheConfig
    token_auth: TokenAuthConfig
    storage: StorageConfig
    mail: MailConfig
    app_policy: AppPolicyConfig
    security: SecurityConfig


__all__ = [
    "ServerConfig",
    "DatabaseConfig",
    "CacheConfig",
    "TokenAuthConfig",
    "StorageConfig",
    "MailConfig",
    "AppPolicyConfig",
    "SecurityConfig",
    "Config",
]
