from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application Information
    app_name: str = Field(default="Tasks Web API")
    app_description: str = Field(default="Task management service")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=True)
    timezone: str = Field(default="UTC")

    # Database Configuration
    db_connection: str = Field(default="postgresql")
    db_host: str = Field(default="127.0.0.1")
    db_port: int = Field(default=5432)
    db_database: str = Field(default="tasks")
    db_username: str = Field(default="tasks")
    db_password: str = Field(default="123")
    db_echo: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    log_file: str = Field(default="logs/app.log")

    @field_validator("db_connection", mode="before")
    def validate_db_connection(cls, v):
        value = str(v).strip().lower()
        if value not in ("postgresql", "sqlite"):
            raise ValueError(f"Unsupported database connection: {v}")
        return value

    @field_validator("log_level", mode="before")
    def validate_log_level(cls, v):
        value = str(v).strip().upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {v}")
        return value

    @property
    def is_sqlite(self) -> bool:
        return self.db_connection == "sqlite"

    @property
    def database_url(self) -> str:
        if self.is_sqlite:
            return f"sqlite:///{self.db_database}"
        return "postgresql+psycopg2://{user}:{password}@{host}:{port}/{database}".format(
            user=self.db_username,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )

    @property
    def safe_database_url(self) -> str:
        """Database URL with the password hidden, for logs and CLI output."""
        if self.is_sqlite or not self.db_password:
            return self.database_url
        return self.database_url.replace(f":{self.db_password}@", ":****@")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_settings():
    try:
        settings = Settings()
        return settings
    except ValidationError as e:
        print("❌ Validation Error:", e)
        raise


settings = load_settings()
