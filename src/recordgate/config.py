import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("RECORDGATE_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    environment: str
    database_url: str
    search_limit: int
    search_case_sensitive: bool
    log_level: str
    log_format: str

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            database_url=os.environ.get(
                "DATABASE_URL", "postgresql://localhost:5432/recordgate"
            ),
            search_limit=int(os.environ.get("RECORDGATE_SEARCH_LIMIT", "50")),
            search_case_sensitive=_flag(
                os.environ.get("RECORDGATE_SEARCH_CASE_SENSITIVE", "false")
            ),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            log_format=os.environ.get("LOG_FORMAT", "json"),
        )


config = Config.from_env()
