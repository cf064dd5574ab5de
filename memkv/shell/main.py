import asyncio
import sys

from memkv.shell.arguments import parse_args
from memkv.shell.config import (
    ConfigException,
    ShellConfig,
    default_config,
    read_shell_config,
)
from memkv.shell.executor import CommandExecutor
from memkv.storage.guarded import AsyncLockedStorage

EXIT_COMMANDS = ("exit", "quit")


async def repl(executor: CommandExecutor, prompt: str) -> None:
    while True:
        try:
            line = await asyncio.to_thread(input, prompt)
        except EOFError:
            print()
            break

        text = line.strip()

        if text.lower() in EXIT_COMMANDS:
            break
        if not text:
            continue

        response = await executor.handle_text(text)

        print(response.text)


async def seed_storage(storage: AsyncLockedStorage, seed: dict[str, str]) -> None:
    for key, value in seed.items():
        await storage.set(key, value)


async def run(config: ShellConfig) -> AsyncLockedStorage:
    storage = AsyncLockedStorage()

    await seed_storage(storage, config.seed)

    if config.shell.verbose:
        print(f"Seeded {len(config.seed)} entries")

    executor = CommandExecutor(storage, verbose=config.shell.verbose)

    await repl(executor, config.shell.prompt)

    return storage


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = (
            read_shell_config(args.config)
            if args.config is not None
            else default_config()
        )
    except ConfigException as e:
        print(e, file=sys.stderr)
        return 1

    if args.verbose:
        config.shell.verbose = True

    asyncio.run(run(config))

    return 0


if __name__ == "__main__":
    sys.exit(main())
