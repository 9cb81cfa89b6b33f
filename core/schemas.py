"""
Settings Schema

Pydantic model for the runtime settings of the terminal effects.
Values are validated once, when configuration is loaded.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TerminalSettings(BaseModel):
    """
    Runtime settings for typed output and the blinking cursor.

    Attributes:
        typing_delay: Seconds slept after each emitted code point
        cursor_interval: Seconds slept between blink iterations (0 = tight loop)
        line_prefix: Prefix re-printed after every newline
        log_level: Application log level
        log_file: Optional log file path
    """
    typing_delay: float = Field(
        0.02,
        ge=0,
        description="Delay after each code point, in seconds"
    )

    cursor_interval: float = Field(
        0.0,
        ge=0,
        description="Delay between cursor blinks, in seconds. 0 keeps the I/O-bound loop"
    )

    line_prefix: str = Field(
        "> ",
        description="String re-printed after every newline",
        examples=["> ", "$ ", "... "]
    )

    log_level: str = Field(
        "INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        None,
        description="Optional file to write logs to"
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
