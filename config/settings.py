from pydantic_settings import BaseSettings, SettingsConfigDict

from src.pm_common.enums import RemainderPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Database (local SQLite file by default; any SQLAlchemy sync URL works)
    DATABASE_URL: str = "sqlite+pysqlite:///./payment_manager.db"

    # Program that must own royalty metadata accounts (Metaplex token-metadata)
    TOKEN_METADATA_PROGRAM_ID: str = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"

    # Payments
    BUY_SIDE_FEE_SHARE_BPS: int = 50
    REMAINDER_POLICY: RemainderPolicy = RemainderPolicy.UNREDUCED_SUM

    # App
    APP_NAME: str = "Payment Manager"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev


settings = Settings()
