import tomllib

from os import PathLike

from pydantic import BaseModel, ValidationError


class ConfigException(Exception):
    """Raised when the shell config file cannot be read or is invalid"""


class ShellSettings(BaseModel):
    prompt: str = "> "
    """Prompt printed before each command"""

    verbose: bool = False
    """Echo every mutation applied to the store"""


class ShellConfig(BaseModel):
    shell: ShellSettings = ShellSettings()

    seed: dict[str, str] = {}
    """Entries stored before the first command is read"""


def default_config() -> ShellConfig:
    return ShellConfig()


def read_shell_config(path: PathLike[str] | str) -> ShellConfig:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigException(f"Cannot read config {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigException(f"Invalid TOML in {path}: {e}") from e

    try:
        return ShellConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigException(f"Invalid config {path}: {e}") from e
