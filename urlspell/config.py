"""
urlspell Configuration
"""
from functools import lru_cache
from pydantic_settings import BaseSettings

# Characters that may appear in a hostname token
DEFAULT_ALPHABET = "1234567890._-@abcdefghijklmnopqrstuvwxyz"

# A host between "//" and the next "/"
DEFAULT_SITE_PATTERN = r"//(?P<site>[a-zA-Z0-9._-]+)/"


class Settings(BaseSettings):
    # Correction
    ALPHABET: str = DEFAULT_ALPHABET
    EDIT_WORKERS: int = 4  # 1 = generate edit blocks inline

    # Training
    SITE_PATTERN: str = DEFAULT_SITE_PATTERN
    MODEL_PATH: str = "data/url_counts.json"

    # HTTP sources
    FETCH_TIMEOUT: int = 10
    USER_AGENT: str = "Mozilla/5.0 (compatible; urlspell/1.0)"

    class Config:
        env_prefix = "URLSPELL_"
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
