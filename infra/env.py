import os
from dotenv import load_dotenv

load_dotenv()


def env_overrides(prefix: str = "TERMINAL_") -> dict:
    """Collect prefixed env vars as setting names, e.g. TERMINAL_TYPING_DELAY -> typing_delay"""
    return {
        key[len(prefix):].lower(): value
        for key, value in os.environ.items()
        if key.startswith(prefix) and value != ""
    }
