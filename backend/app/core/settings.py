from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Core
    app_name: str = "Student Career Guidance API"
    environment: str = "development"
    database_url: str = "sqlite:///./app.db"  # Override in production

    # Key-value store
    kv_table_name: str = "kv_store"

    # Market trends cache
    market_cache_prefix: str = "market_trends_"
    market_cache_ttl_ms: int = 3_600_000  # 1 hour
    cache_sweep_interval_seconds: int = 0  # 0 disables the background sweep

    # Storage namespaces for the non-expiring blobs
    analysis_prefix: str = "student_analysis_"
    preferences_prefix: str = "user_preferences_"

    # Rate limiting
    rate_limit_default: str = "200/minute"

    # CORS
    cors_allow_origins: str = "*"
    cors_allow_methods: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: List[str] = ["Content-Type", "Authorization"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
