from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./db.sqlite"
    sql_echo: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    cors_origin_regex: str = "https?://.*"

    class Config:
        env_file = ".env"

settings = Settings()
