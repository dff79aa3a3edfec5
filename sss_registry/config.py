from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    app_title: str = "SSS Online Form Registry"

    # Full SQLAlchemy URL; when unset it is assembled from the db_* parts
    database_url: Optional[str] = None
    db_driver: str = "mysql+pymysql"
    db_host: str = "localhost"
    db_port: int = 3306
    db_name: str = "ws310_db"
    db_user: str = "root"
    db_password: str = ""
    sql_echo: bool = False

    log_level: str = "INFO"

    # Reject a new applicant whose email is already registered
    enforce_unique_email: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        credentials = self.db_user
        if self.db_password:
            credentials = f"{self.db_user}:{self.db_password}"
        return f"{self.db_driver}://{credentials}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache()
def get_settings():
    return Settings()
