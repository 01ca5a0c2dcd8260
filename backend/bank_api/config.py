# bank_api/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Bank Account API"
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Postgres connection parts (DATABASE_URL wins when set)
    database_url: str | None = os.getenv("DATABASE_URL")
    db_user: str = os.getenv("DB_USER", "postgres")
    db_name: str = os.getenv("DB_NAME", "postgres")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_host: str = os.getenv("DB_HOST", "127.0.0.1")
    db_port: int = int(os.getenv("DB_PORT", "5432"))
    db_ssl_mode: str = os.getenv("DB_SSL_MODE", "disable")

    # Token signing
    # No default: issuing a token without a secret must fail
    jwt_secret: str | None = os.getenv("JWT_SECRET")
    token_ttl_hours: int = int(os.getenv("TOKEN_TTL_HOURS", "24"))

    # Accounts
    account_number_start: int = int(os.getenv("ACCOUNT_NUMBER_START", "11111111"))
    password_hash_rounds: int = int(os.getenv("PASSWORD_HASH_ROUNDS", "3"))  # argon2 time cost

    # Set by the CLI (--seed)
    seed_demo_accounts: bool = os.getenv("SEED_DEMO_ACCOUNTS", "false").lower() in ("true", "1", "yes")

    def db_url(self) -> str:
        """Connection URL handed to Tortoise ORM."""
        if self.database_url:
            return self.database_url
        return (
            f"postgres://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/"
            f"{self.db_name}?ssl={self.db_ssl_mode}"
        )

    def db_target(self) -> str:
        """Connection target safe for logs (no password)."""
        if self.database_url:
            return self.database_url.split("@")[-1]
        return f"{self.db_host}:{self.db_port}/{self.db_name}"

settings = Settings()  # Instantiate configuration
