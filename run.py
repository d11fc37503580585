"""
GlyphTerm — run.py
Main entry point for the GlyphTerm demo applications.
"""

import argparse
import sys
from pathlib import Path

# Ensure we can import glyphterm packages
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from glyphterm.config import Builder, load_config
from glyphterm.errors import TermError
from ui.screens import HelloApp, InputEchoApp
from ui.terminal import run

DEMOS = {
    "hello": HelloApp,
    "echo": InputEchoApp,
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="GlyphTerm demos")
    parser.add_argument("demo", nargs="?", default="hello", choices=sorted(DEMOS))
    parser.add_argument("--config", type=Path, help="TOML file with a [terminal] table")
    parser.add_argument("--font", type=Path, help="16x16 glyph atlas image")
    args = parser.parse_args(argv)

    try:
        base = load_config(args.config) if args.config else None
        builder = Builder(base)
        if base is None:
            builder.with_title(f"GlyphTerm: {args.demo}")
        if args.font:
            builder.with_font_path(args.font)
        run(DEMOS[args.demo](), builder.build())
    except (TermError, FileNotFoundError) as exc:
        print(f"glyphterm: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
