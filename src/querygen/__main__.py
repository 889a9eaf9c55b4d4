import argparse
import os
import sys
from typing import Optional

from typing_extensions import Self

from common.model.models import ResourceQuerySpec
from common.utils.file_utils import load_document
from common.utils.profiling import log_execution_time
from common.utils.version import get_version
from querygen.config import get_config
from querygen.queries import RESOURCE_QUERIES, gen_resource_query

# Initialize configuration
config = get_config()


class CommandNotFound(Exception):
    pass


class ValidCommands(dict):
    def __missing__(self: Self, key: str) -> None:
        raise CommandNotFound(f"Invalid command: {key}")


def _resolve_index(args: argparse.Namespace) -> str:
    index = getattr(args, "index", None)
    return index if index is not None else config.index


@log_execution_time(config.logger)
def cmd_resource_query(args: argparse.Namespace) -> str:
    """
    Execute one of the built-in resource queries
    :param args: parsed arguments; args.command names the resource
    :return: the query string
    """
    index = _resolve_index(args)
    config.logger.info(f"cmd_resource_query; resource={args.command}; index={index}")
    return RESOURCE_QUERIES[args.command](index)


@log_execution_time(config.logger)
def cmd_custom_query(args: argparse.Namespace) -> str:
    """
    Execute a query described by a caller-supplied YAML or JSON file
    :param args: parsed arguments; args.spec_file is the query description
    :return: the query string
    """
    if not args.spec_file:
        raise ValueError("Must specify a query spec file with -f/--spec-file")
    spec_path = os.path.abspath(args.spec_file)
    config.logger.debug(f"spec_path: {spec_path}")
    spec = ResourceQuerySpec.model_validate(load_document(spec_path))
    config.logger.info(f"cmd_custom_query; spec={spec}")
    return gen_resource_query(spec, _resolve_index(args))


def cmd_list(args: Optional[argparse.Namespace] = None) -> str:
    return "\n".join(sorted(RESOURCE_QUERIES))


# specify the valid commands
valid_commands = ValidCommands(
    {name: cmd_resource_query for name in RESOURCE_QUERIES}
)
valid_commands.update(
    {
        "custom": lambda args: cmd_custom_query(args),
        "list": lambda args: cmd_list(args),
    }
)


def dispatch_command(args: argparse.Namespace) -> None:
    """
    Dispatch a command and print its output
    :param args: The parsed arguments
    """
    config.logger.info(f"DISPATCHING|command: {args.command}")
    cmd = valid_commands[args.command]
    output = cmd(args)
    config.logger.debug(f"DISPATCHED|command: {args.command}; output: {output}")
    print(output)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse the args from the script
    :return: the parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="querygen",
        description="Generate audit-log track-event search queries",
    )

    parser.add_argument("command", choices=valid_commands)
    parser.add_argument("-i", "--index", help=f"index to search (default: {config.index})")
    parser.add_argument("-f", "--spec-file", help="query spec file for the custom command")

    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    args = parser.parse_args(argv)
    config.logger.debug(f"command is: {args.command}")
    config.logger.debug(f"spec file is: {args.spec_file}")
    return args


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    try:
        dispatch_command(args)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
