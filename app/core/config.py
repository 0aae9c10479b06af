from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./portal.db"

    API_DOCUMENTATION_URL: str = "http://api-documentation:9680"
    THIRD_PARTY_DEVELOPER_URL: str = "http://third-party-developer:9615"
    REQUEST_TIMEOUT_SECONDS: float = 5.0

    LOGIN_URL: str = "/developer/login"
    SESSION_COOKIE_NAME: str = "PLAY_SESSION"

    # "http" streams resources from api-documentation, "local" reads RESOURCE_ROOT
    RESOURCE_STORE: str = "http"
    RESOURCE_ROOT: str = "/app/resources"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
