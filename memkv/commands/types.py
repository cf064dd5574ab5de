from pydantic.dataclasses import dataclass


@dataclass
class BaseCommand: ...


# Read-only commands


@dataclass
class QueryCommand(BaseCommand):
    key: str
    """Key to look up"""


@dataclass
class SizeCommand(BaseCommand): ...


@dataclass
class EmptyCommand(BaseCommand): ...


# Commands that change the store


@dataclass
class StateMachineCommand(BaseCommand): ...


@dataclass
class SetCommand(StateMachineCommand):
    key: str
    """Key to insert or overwrite"""

    value: str
    """New value, replaces any previous one"""


@dataclass
class DeleteCommand(StateMachineCommand):
    key: str
    """Key whose entry is removed and handed back"""
