from pydantic_settings import BaseSettings


def _normalize_db_url(uri: str) -> str:
    if uri.startswith("postgres://"):
        uri = "postgresql://" + uri[len("postgres://"):]
    return uri


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./portfolio.db"

    CLOUDFLARE_R2_ENDPOINT: str | None = None
    CLOUDFLARE_R2_ACCESS_KEY_ID: str | None = None
    CLOUDFLARE_R2_SECRET_ACCESS_KEY: str | None = None
    CLOUDFLARE_R2_BUCKET_NAME: str | None = None
    CLOUDFLARE_R2_PUBLIC_URL: str | None = None

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    ADMIN_TOKEN: str | None = None
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    EXPOSE_ERRORS: bool = False

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        return _normalize_db_url(self.DATABASE_URL)

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
