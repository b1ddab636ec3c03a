from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "repairdesk"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_prefix: str = ""

    database_url: str = "sqlite:///./repairdesk.db"
    db_echo: bool = False
    db_connect_retries: int = 30
    db_connect_retry_delay: float = 1.0

    run_migrations: bool = True
    alembic_ini: str = "alembic.ini"

    log_level: str = "INFO"

settings = Settings()
