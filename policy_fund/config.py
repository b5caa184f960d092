"""
Configuration settings for the Policy Fund Matching Engine
"""
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    
    # Application Configuration
    app_name: str = Field(default="Policy Fund Matching Engine", env="APP_NAME")
    app_version: str = Field(default="1.0.0", env="APP_VERSION")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")
    
    # API Configuration
    api_prefix: str = Field(default="/api/v1", env="API_PREFIX")
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080", 
        env="CORS_ORIGINS"
    )
    
    # Matching run defaults
    default_top_n: int = Field(default=5, ge=1, env="DEFAULT_TOP_N")
    default_min_score: float = Field(default=50, ge=0, le=100, env="DEFAULT_MIN_SCORE")
    max_per_institution: int = Field(default=2, ge=1, env="MAX_PER_INSTITUTION")
    
    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Create global settings instance
settings = Settings()
