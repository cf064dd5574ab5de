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
from memkv.shell.messages import CommandResponse
from memkv.storage.guarded import AsyncLockedStorage


def _not_found(key: str) -> CommandResponse:
    return CommandResponse(text=f"Key '{key}' not found")


class CommandExecutor:
    _storage: AsyncLockedStorage

    def __init__(self, storage: AsyncLockedStorage, verbose: bool = False) -> None:
        self._storage = storage
        self._verbose = verbose

    async def execute(self, cmd: BaseCommand) -> CommandResponse:
        if self._verbose and isinstance(cmd, StateMachineCommand):
            print(f"Apply {cmd}")

        match cmd:
            case SetCommand(key, value):
                await self._storage.set(key, value)

                return CommandResponse(text=f"Set {key}={value}")

            case QueryCommand(key):
                value = await self._storage.query(key)

                return _not_found(key) if value is None else CommandResponse(text=value)

            case DeleteCommand(key):
                value = await self._storage.delete(key)

                if value is None:
                    return _not_found(key)

                return CommandResponse(text=f"Deleted {key}={value}")

            case SizeCommand():
                return CommandResponse(text=str(await self._storage.size()))

            case EmptyCommand():
                return CommandResponse(text=str(await self._storage.is_empty()))

            case c:
                return CommandResponse(text=f"Unknown command {c}")

    async def handle_text(self, text: str) -> CommandResponse:
        try:
            cmd = parse_command(text)
        except ParseException as e:
            return CommandResponse(text=str(e))

        return await self.execute(cmd)
