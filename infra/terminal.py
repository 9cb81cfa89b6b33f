"""
Terminal Effects

Cosmetic output helpers for CLI demos:
- write: typed output, one code point at a time
- blink: a blinking underscore cursor after a prompt

Both block the calling thread and write straight to stdout.
An interrupt (Ctrl-C) during either effect propagates to the caller.
"""

import sys
import time
from typing import Optional, TextIO, Union

from app import config
from core.time_units import TimeUnit
from infra.logger import log_effect_start, log_effect_complete, log_effect_interrupted


# ═══════════════════════════════════════════════════════════════════════════════
# TYPED OUTPUT
# ═══════════════════════════════════════════════════════════════════════════════

def write(
    text: str,
    line_prefix: str,
    *,
    delay: Optional[float] = None,
    stream: Optional[TextIO] = None
):
    """
    Print text with typing effect.

    Every code point is flushed on its own and followed by a pause.
    After each newline the line prefix is printed, so continuation lines
    look like they belong to the same prompt. Finishes with a newline,
    the prefix on its own line, and a blank line.

    Args:
        text: Text to print
        line_prefix: String printed after every newline
        delay: Pause after each code point in seconds (default: configured typing delay)
        stream: Output stream (default: sys.stdout)

    Raises:
        ValueError: If delay is negative

    Example:
        write("a\\nb", "> ") prints "a\\n> b\\n> \\n\\n"
    """
    if delay is None:
        delay = config.SETTINGS.typing_delay
    if delay < 0:
        raise ValueError(f"delay must be non-negative, got {delay}")
    out = stream if stream is not None else sys.stdout

    log_effect_start("write", code_points=len(text), prefix=repr(line_prefix), delay=delay)
    start = time.perf_counter()
    written = 0

    try:
        # str iterates by code point
        for char in text:
            print(char, end="", flush=True, file=out)
            if char == "\n":
                print(line_prefix, end="", flush=True, file=out)
            written += 1
            time.sleep(delay)
    except KeyboardInterrupt:
        log_effect_interrupted("write", written=written, total=len(text))
        raise

    print(file=out)
    print(line_prefix, file=out)
    print(file=out, flush=True)

    log_effect_complete("write", time.perf_counter() - start, code_points=written)


# ═══════════════════════════════════════════════════════════════════════════════
# BLINKING CURSOR
# ═══════════════════════════════════════════════════════════════════════════════

def blink(
    prompt: str,
    duration: float,
    unit: Union[TimeUnit, str] = TimeUnit.SECONDS,
    *,
    interval: Optional[float] = None,
    stream: Optional[TextIO] = None
) -> int:
    """
    Print a prompt followed by a blinking cursor for a fixed duration.

    The deadline is wall-clock based. With no interval the loop redraws as
    fast as the terminal accepts output.

    Args:
        prompt: Text printed once before the cursor
        duration: How long to blink, in `unit`
        unit: TimeUnit or unit name ("ms", "seconds", ...)
        interval: Pause between blinks in seconds (default: configured cursor interval)
        stream: Output stream (default: sys.stdout)

    Returns:
        Number of blink iterations performed

    Raises:
        UnknownTimeUnitError: If unit is not recognized
        ValueError: If interval is negative
    """
    unit = TimeUnit.parse(unit)
    if interval is None:
        interval = config.SETTINGS.cursor_interval
    if interval < 0:
        raise ValueError(f"interval must be non-negative, got {interval}")
    out = stream if stream is not None else sys.stdout

    print(prompt, end="", file=out)

    seconds = unit.to_seconds(duration)
    log_effect_start("blink", prompt=repr(prompt), seconds=seconds, interval=interval)
    start = time.perf_counter()
    iterations = 0

    try:
        end = time.time() + seconds
        while time.time() < end:
            print(config.CURSOR_ON, end="", flush=True, file=out)
            print(config.CURSOR_OFF, end="", flush=True, file=out)
            iterations += 1
            if interval:
                time.sleep(interval)
    except KeyboardInterrupt:
        log_effect_interrupted("blink", iterations=iterations)
        raise

    # Prompt is flushed even when the loop never ran
    out.flush()

    log_effect_complete("blink", time.perf_counter() - start, iterations=iterations)
    return iterations
