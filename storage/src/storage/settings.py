"""Settings loaded from the environment (and a .env file when present)."""

import os

from dotenv import load_dotenv

DEFAULT_HOME = "~/.yarukoto"


def get_home() -> str:
    return os.path.expanduser(os.getenv("YARUKOTO_HOME", DEFAULT_HOME))


def load_config() -> dict:
    load_dotenv()
    home = get_home()
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        os.makedirs(home, exist_ok=True)
        database_url = f"sqlite:///{os.path.join(home, 'yarukoto.db')}"
    return {
        "home": home,
        "database_url": database_url,
        "timezone": os.getenv("YARUKOTO_TIMEZONE", "Asia/Tokyo"),
        "log_level": os.getenv("YARUKOTO_LOG_LEVEL", "INFO"),
        "user": os.getenv("YARUKOTO_USER"),
    }
