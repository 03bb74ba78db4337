"""CLI entry point for the atf-config tool."""

import argparse
import logging
import sys
from collections.abc import Sequence

from atf_core.config import Config, ConfigKeyNotFoundError


def format_variables(
    config: Config, names: Sequence[str], *, terse: bool = False
) -> Sequence[str]:
    """Format the requested configuration variables, one line each.

    Args:
        config: Configuration to read values from
        names: Variables to print in order; empty means all, sorted by name
        terse: Print only the values instead of ``name : value`` pairs

    Raises:
        ConfigKeyNotFoundError: If any requested name is not recognized

    """
    if names:
        values = [(name, config.get(name)) for name in names]
    else:
        values = sorted(config.get_all().items())

    if terse:
        return [value for _, value in values]
    return [f"{name} : {value}" for name, value in values]


def run(names: Sequence[str], terse: bool = False, config: Config | None = None) -> int:
    """Print configuration variables and return exit code."""
    log = logging.getLogger("atf_core")

    if config is None:
        config = Config()

    try:
        lines = format_variables(config, names, terse=terse)
    except ConfigKeyNotFoundError as exc:
        log.error("%s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="atf-config",
        description="Print the values of the testing framework's configuration",
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Configuration variables to print (default: all of them)",
    )
    parser.add_argument(
        "-t",
        "--terse",
        action="store_true",
        help="Print only the values, without their names",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information on stderr",
    )

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("atf_core").setLevel(level)

    sys.exit(run(names=args.names, terse=args.terse))


if __name__ == "__main__":  # pragma: no cover
    main()
