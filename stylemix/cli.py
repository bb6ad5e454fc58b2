"""
STYLEMIX command line
=====================

    python -m stylemix render styles/main.css.j2 -o dist/main.css
    python -m stylemix breakpoints
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .breakpoints import configure_breakpoints, get_breakpoints, load_breakpoints_file
from .core.config import get_config
from .core.logging_config import LoggingConfig
from .exceptions import StylemixError
from .services.stylesheet_engine import render_stylesheet
from .version import APP_NAME, VERSION

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="stylemix",
        description=f"{APP_NAME}: expand style mixins in stylesheet templates",
    )
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    ap.add_argument("--log-level", default=None,
                    help="DEBUG, INFO, WARNING or ERROR (default: LOG_LEVEL setting)")
    ap.add_argument("--log-file", default=None, metavar="FILE",
                    help="also write logs to a rotating file")
    ap.add_argument("--breakpoints", default=None, metavar="FILE",
                    help="JSON file replacing the breakpoint table")

    sub = ap.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="render a stylesheet template")
    render.add_argument("template", help="template file")
    render.add_argument("-o", "--output", default=None,
                        help="output file (default: stdout)")
    render.add_argument("--template-dir", default=None,
                        help="search directory for includes (default: STYLEMIX_TEMPLATE_DIR "
                             "when the template lives there, else the template's folder)")

    sub.add_parser("breakpoints", help="print the active breakpoint table")
    return ap


def _template_dir(template: Path, requested: Optional[str]) -> Optional[Path]:
    if requested:
        return Path(requested)
    configured = get_config().get_path("STYLEMIX_TEMPLATE_DIR")
    if configured and not template.is_absolute() and (configured / template).exists():
        return configured
    return None


def _render(args) -> int:
    template = Path(args.template)
    css = render_stylesheet(template, template_dir=_template_dir(template, args.template_dir))

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(css, encoding="utf-8")
        logger.info(f"Wrote {out} ({len(css)} chars)")
    else:
        sys.stdout.write(css)
    return 0


def _breakpoints(args) -> int:
    for name, predicate in get_breakpoints().items():
        print(f"{name:<14} {predicate}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    LoggingConfig.setup_logging(log_level=args.log_level, log_file=args.log_file)

    try:
        if args.breakpoints:
            configure_breakpoints(load_breakpoints_file(args.breakpoints))
        if args.command == "render":
            return _render(args)
        return _breakpoints(args)
    except StylemixError as e:
        logger.error(f"{APP_NAME}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
