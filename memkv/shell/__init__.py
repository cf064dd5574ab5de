from memkv.shell.executor import CommandExecutor
from memkv.shell.messages import CommandResponse

__all__ = ["CommandExecutor", "CommandResponse"]
