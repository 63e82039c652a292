import argparse
import logging
import shutil
import sys

from . import __version__
from .app import App
from .config import Config, build_config, load_defaults
from .errors import BigTimerError
from .logs import setup_logging

log = logging.getLogger(__name__)

COLOR_NAMES = "Black, Red, Green, Yellow, Blue, Purple, Cyan, White"


def _headless_snapshot(config: Config) -> str:
    size = shutil.get_terminal_size((80, 24))
    return App(config).frame(size.columns, size.lines).as_text()


def build_parser() -> argparse.ArgumentParser:
    epilog = (
        "Controls: s/m/h remove a second/minute/hour, S/M/H add one, q or Esc quit. "
        f"Colors: {COLOR_NAMES}, or \"R,G,B\", \"R G B\" or #RRGGBB with channels 0-255."
    )
    parser = argparse.ArgumentParser(
        prog="bigtimer",
        description="Full-screen terminal countdown with an optional stopwatch overrun",
        epilog=epilog,
        add_help=False,
    )
    parser.add_argument("text", nargs="*", help="message shown above the timer")
    parser.add_argument("-h", dest="hours", type=int, metavar="N", help="hours")
    parser.add_argument("-m", dest="minutes", type=int, metavar="N", help="minutes")
    parser.add_argument("-s", dest="seconds", type=int, metavar="N", help="seconds")
    parser.add_argument("-k", dest="allow_negative", action="store_true", help="keep counting past zero")
    parser.add_argument("-0", dest="hide_zero", action="store_true", help="hide leading zero hours and minutes")
    parser.add_argument("-f", dest="block_font", action="store_true", help="draw with the block font")
    parser.add_argument("-z", dest="center", action="store_true", help="center horizontally")
    parser.add_argument("-c", dest="color", metavar="COLOR", help="foreground color: a name, \"R,G,B\", \"R G B\" or #RRGGBB")
    parser.add_argument("-p", dest="message_padding", type=int, nargs="+", metavar="N", help="message padding: top [bottom]")
    parser.add_argument("-t", dest="timer_padding", type=int, nargs="+", metavar="N", help="timer padding: top [bottom], ignored with -z")
    parser.add_argument("-i", dest="timer_indent", type=int, metavar="N", help="timer left indent, ignored with -z")
    parser.add_argument("--headless", action="store_true", help="print the first frame and exit")
    parser.add_argument("--version", action="version", version=f"bigtimer {__version__}")
    parser.add_argument("--help", action="help", help="show this help message and exit")
    return parser


def parse_args(argv=None):
    return build_parser().parse_intermixed_args(argv)


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        build_parser().print_help()
        return 0
    args = parse_args(argv)
    setup_logging()
    try:
        config = build_config(args, load_defaults())
    except BigTimerError as exc:
        print(f"bigtimer: error: {exc}", file=sys.stderr)
        return exc.exit_code
    log.info("config %s", config)

    if args.headless:
        print(_headless_snapshot(config))
        return 0

    try:
        from .ui import run

        run(config)
    except KeyboardInterrupt:
        return 0
    except BigTimerError as exc:
        log.error("terminal failure: %s", exc)
        print(f"bigtimer: error: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
