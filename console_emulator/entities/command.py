from dataclasses import dataclass


@dataclass(frozen=True)
class CommandInvocation:
    """A command line split into its name and positional arguments."""

    name: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, command_line: str) -> "CommandInvocation":
        # str.split() collapses runs of whitespace and never yields empty tokens
        tokens = command_line.split()
        if not tokens:
            return cls(name="")
        return cls(name=tokens[0], args=tuple(tokens[1:]))

    @property
    def is_blank(self) -> bool:
        return not self.name

    @property
    def arg_count(self) -> int:
        return len(self.args)
