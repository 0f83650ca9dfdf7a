"""Command-line entry point.

    swapi-cli characters --id 1
    swapi-cli characters --search vader

Running without a subcommand, or `characters` without `--id`/`--search`,
prints help and exits 0. Every runtime failure is reported on stderr and
mapped to `config.EXIT_FAILURE`.
"""
import argparse
import logging
import sys
from typing import Iterable

from . import config, decoder, transport
from .models import CharacterRecord

LOG = logging.getLogger(__name__)

HELP_FLAGS = ("-?", "-h", "--help")
COMMAND = "characters"

CHARACTERS_DESCRIPTION = (
    "With this command, you can retrieve information about characters from "
    "Star Wars using the Star Wars Web API."
)


def format_character(character: CharacterRecord) -> str:
    """Render the four printed fields, one per line, in fixed order."""
    rows = (
        ("Name", character.name),
        ("Birth year", character.birth_year),
        ("Height", character.height),
        ("Eye color", character.eye_color),
    )
    return "\n".join(f"{label}: {value if value is not None else ''}" for label, value in rows)


def show_character(character: CharacterRecord) -> None:
    print(format_character(character))


def show_characters(characters: Iterable[CharacterRecord]) -> None:
    for character in characters:
        show_character(character)
        print()


def _characters(ns: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    # --id takes priority when both options are given
    if ns.id is not None:
        body = transport.fetch_by_id(ns.id, base_url=ns.base_url, timeout=ns.timeout)
        show_character(decoder.decode_one(body))
        return 0
    if ns.search is not None:
        body = transport.fetch_search(ns.search, base_url=ns.base_url, timeout=ns.timeout)
        show_characters(decoder.decode_many(body))
        return 0
    parser.print_help()
    return 0


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that raises `argparse.ArgumentError` instead of exiting.

    Lets `main` report malformed options like any other failure. The help
    action still exits 0.
    """

    def error(self, message):
        raise argparse.ArgumentError(None, message)


def build_parsers() -> tuple[CommandParser, CommandParser]:
    """Return the top-level parser and the `characters` parser.

    The two are kept separate rather than wired as argparse subparsers, so an
    unknown command word is ignored instead of rejected.
    """
    parser = CommandParser(prog="swapi-cli", add_help=False, exit_on_error=False,
                           formatter_class=argparse.RawDescriptionHelpFormatter,
                           description="Look up Star Wars characters from the command line.",
                           epilog=f"commands:\n  {COMMAND:<12}{CHARACTERS_DESCRIPTION}")
    parser.add_argument(*HELP_FLAGS, action="help", help="Show help information")
    parser.add_argument("--base-url", default=None,
                        help="API base URL (overrides SWAPI_BASE_URL env)")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Request timeout in seconds (overrides SWAPI_TIMEOUT env)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    chars = CommandParser(prog=f"swapi-cli {COMMAND}", add_help=False, exit_on_error=False,
                          description=CHARACTERS_DESCRIPTION)
    chars.add_argument(*HELP_FLAGS, action="help", help="Show help information")
    chars.add_argument("-i", "--id", default=None, help="Get a specific character by ID.")
    chars.add_argument("-s", "--search", default=None,
                       help="Search a character in the star wars API. Use this option if you "
                            "don't know the unique ID of a specific character.")
    return parser, chars


def _split_command(argv: list[str]) -> tuple[list[str], list[str] | None]:
    """Split argv at the command word; the tail is None when there is no command."""
    if COMMAND not in argv:
        return argv, None
    idx = argv.index(COMMAND)
    return argv[:idx], argv[idx + 1:]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else config.LOG_LEVEL, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    for name in config.IGNORED_ENV:
        LOG.warning("Ignoring invalid value of %s", name)


def main(argv: list[str] | None = None) -> int:
    head, tail = _split_command(list(argv if argv is not None else sys.argv[1:]))
    parser, chars = build_parsers()

    try:
        ns, unknown = parser.parse_known_args(head)
        if tail is not None:
            ns, extra = chars.parse_known_args(tail, namespace=ns)
            unknown += extra

        _setup_logging(ns.verbose)
        if unknown:
            LOG.debug("Ignoring unrecognized arguments: %s", unknown)

        if tail is None:
            parser.print_help()
            return 0
        return _characters(ns, chars)
    except Exception as ex:
        LOG.debug("Command failed", exc_info=True)
        print(ex, file=sys.stderr)
        return config.EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
