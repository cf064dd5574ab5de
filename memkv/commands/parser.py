from memkv.commands.exceptions import ParseException
from memkv.commands.types import (
    BaseCommand,
    DeleteCommand,
    EmptyCommand,
    QueryCommand,
    SetCommand,
    SizeCommand,
)


def parse_command(cmd: str) -> BaseCommand:
    # Everything after the key belongs to the value of a set
    tokens = cmd.strip().split(maxsplit=2)

    if tokens:
        tokens[0] = tokens[0].lower()

    match tokens:
        case ["s" | "set", key, value]:
            return SetCommand(key, value)
        case ["q" | "query", key]:
            return QueryCommand(key)
        case ["d" | "delete", key]:
            return DeleteCommand(key)
        case ["n" | "size"]:
            return SizeCommand()
        case ["e" | "empty"]:
            return EmptyCommand()
        case [cmd, *args]:
            raise ParseException(f"Invalid command {cmd} with arguments {args}")
        case t:
            raise ParseException(f"Invalid token sequence {t}")
