"""
Configuration settings for Microblog Store
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Microblog Store"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Trending terms
    TRENDING_MARKER: str = "#"
    TRENDING_LIMIT: int = 10

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Follow suggestions (friends of friends)
    SUGGESTION_LIMIT: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
