# gfxhelper/__main__.py
import argparse
import sys

from gfxhelper.bug_report import install_excepthook
from gfxhelper.core import get_instance
from gfxhelper.demos import circles_example, snowflake_example
from gfxhelper.logger import setup_logging

DEMOS = {
    "snowflake": snowflake_example,
    "circles": circles_example,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="gfxhelper", description="GraphicsHelper demos")
    parser.add_argument("--demo", choices=sorted(DEMOS), default="snowflake")
    return parser.parse_args(argv)


def main(argv=None):
    install_excepthook()
    setup_logging()
    args = parse_args(argv)
    gfx = get_instance()
    gfx.flush()
    DEMOS[args.demo](gfx)
    return gfx.app.exec_()


if __name__ == "__main__":
    sys.exit(main())
