"""
Terminal Effects Configuration

Centralized configuration for typed output and the blinking cursor.
Defaults live here; TERMINAL_* environment variables (or a .env file)
override them through TerminalSettings.
"""

from core.schemas import TerminalSettings, LOG_LEVELS
from infra.env import env_overrides


# ═══════════════════════════════════════════════════════════════════════════════
# TYPED OUTPUT
# ═══════════════════════════════════════════════════════════════════════════════

# Pause after each emitted code point (seconds)
TYPING_DELAY: float = 0.02

# Prefix re-printed after every newline
DEFAULT_LINE_PREFIX: str = "> "


# ═══════════════════════════════════════════════════════════════════════════════
# BLINKING CURSOR
# ═══════════════════════════════════════════════════════════════════════════════

# Pause between blink iterations (seconds)
# 0 keeps the tight loop whose cadence is set by terminal I/O alone
CURSOR_INTERVAL: float = 0.0

# Cursor glyph and its erase sequence (each followed by a backspace)
CURSOR_ON: str = "_\b"
CURSOR_OFF: str = " \b"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

# Log level for the application
LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

# Log file path (None disables file logging)
LOG_FILE_PATH = None


# ═══════════════════════════════════════════════════════════════════════════════
# HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def load_settings(**overrides) -> TerminalSettings:
    """
    Build settings from defaults, TERMINAL_* env vars, then explicit overrides.

    Raises:
        pydantic.ValidationError: If any value is invalid
    """
    values = {
        "typing_delay": TYPING_DELAY,
        "cursor_interval": CURSOR_INTERVAL,
        "line_prefix": DEFAULT_LINE_PREFIX,
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE_PATH,
    }
    values.update(env_overrides())
    values.update({k: v for k, v in overrides.items() if v is not None})
    return TerminalSettings(**values)


def validate_config():
    """Validate configuration on startup"""
    assert TYPING_DELAY >= 0, "TYPING_DELAY must be non-negative"
    assert CURSOR_INTERVAL >= 0, "CURSOR_INTERVAL must be non-negative"
    assert LOG_LEVEL in LOG_LEVELS, f"Invalid LOG_LEVEL: {LOG_LEVEL}"
    assert CURSOR_ON.endswith("\b") and CURSOR_OFF.endswith("\b"), "Cursor sequences must end with a backspace"


# Validate on import
validate_config()

SETTINGS: TerminalSettings = load_settings()
