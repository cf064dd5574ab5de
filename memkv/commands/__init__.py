from memkv.commands.exceptions import ParseException
from memkv.commands.parser import parse_command
from memkv.commands.types import (
    BaseCommand,
    DeleteCommand,
    EmptyCommand,
    QueryCommand,
    SetCommand,
    SizeCommand,
    StateMachineCommand,
)

__all__ = [
    "BaseCommand",
    "DeleteCommand",
    "EmptyCommand",
    "ParseException",
    "QueryCommand",
    "SetCommand",
    "SizeCommand",
    "StateMachineCommand",
    "parse_command",
]
