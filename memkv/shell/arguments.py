import argparse
from pathlib import Path


def parse_args(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Interactive in-memory key-value store")

    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="path to a TOML shell config"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="echo every applied mutation"
    )

    return parser.parse_args(argv)
