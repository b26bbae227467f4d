from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "fintrack-entity-gen"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    entities_dir: str = "entities"
    output_dir: str = "generated"

    warn_id_without_not_settable: bool = True

settings = Settings()
