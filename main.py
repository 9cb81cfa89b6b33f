"""
Terminal Effects Demo CLI

Blinks a prompt, then types text with a line prefix:
    python main.py "Hello" --blink 2 --prompt "$ "
    echo "from stdin" | python main.py --prefix "... "
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from app.config import validate_config, load_settings
from core.schemas import TerminalSettings
from core.time_units import TimeUnit
from infra.logger import setup_logging, logger_cli
from infra.terminal import blink, write


# ═══════════════════════════════════════════════════════════════════════════════
# CLI INTERFACE
# ═══════════════════════════════════════════════════════════════════════════════

class CLI:
    """
    Demo driver for the terminal effects.

    Shows an optional blinking prompt, then types the text out.
    """

    def __init__(self, settings: TerminalSettings):
        self.settings = settings


    def run(self, text: str, prompt: str = "", blink_for: float = 0, unit: TimeUnit = TimeUnit.SECONDS):
        """Run one blink-then-type sequence"""
        if blink_for > 0:
            iterations = blink(prompt, blink_for, unit, interval=self.settings.cursor_interval)
            print()
            logger_cli.debug(f"BLINK_DONE | iterations={iterations}")

        write(text, self.settings.line_prefix, delay=self.settings.typing_delay)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Typed output and blinking cursor demo")
    parser.add_argument("text", nargs="*", help="Text to type (default: --file or stdin)")
    parser.add_argument("--file", type=Path, help="Read text from a file")
    parser.add_argument("--prefix", help="Line prefix printed after every newline")
    parser.add_argument("--prompt", default="", help="Prompt shown before the blinking cursor")
    parser.add_argument("--blink", type=float, default=0, help="Blink duration (0 disables)")
    parser.add_argument("--unit", default="seconds", help="Unit for --blink (ms, s, min, ...)")
    parser.add_argument("--delay", type=float, help="Typing delay per code point, in seconds")
    return parser.parse_args(argv)


def read_text(args: argparse.Namespace) -> str:
    """Pick the text source: positional words, then --file, then stdin"""
    if args.text:
        return " ".join(args.text)
    if args.file:
        return args.file.read_text(encoding="utf-8").rstrip("\n")
    return sys.stdin.read().rstrip("\n")


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════

def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the application.

    Sets up logging, validates configuration, and runs the demo.
    """
    try:
        args = parse_args(argv)
        settings = load_settings(line_prefix=args.prefix, typing_delay=args.delay)

        setup_logging(level=settings.log_level, log_file=settings.log_file)

        validate_config()
        logger_cli.debug("Configuration valid [OK]")

        unit = TimeUnit.parse(args.unit)
        text = read_text(args)

        CLI(settings).run(text, prompt=args.prompt, blink_for=args.blink, unit=unit)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(0)

    except Exception as e:
        logger_cli.error(f"CLI_ERROR | error={str(e)}")
        print(f"\n❌ Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
