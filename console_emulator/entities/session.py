"""
Session domain entity.
"""

PROMPT_FORMAT = "{user}@{host}:{directory}$ "
DEFAULT_HOST = "android"


def validate_user(user: str) -> str:
    """
    Ensure a user name is a non-empty string.

    Raises:
        ValueError: If user is not a non-empty string
    """
    if not isinstance(user, str) or not user.strip():
        raise ValueError("user must be a non-empty string")
    return user


class Session:
    """
    Mutable state of one console: who is typing and where they are.

    The current directory is expected to be a canonical absolute path to a
    readable directory; the console validates it before assigning.
    """

    def __init__(self, user: str, current_directory: str, host: str = DEFAULT_HOST):
        self.user = validate_user(user)
        self.current_directory = current_directory
        self.host = host or DEFAULT_HOST

    @property
    def prompt(self) -> str:
        """Prompt shown before user input, e.g. ``user@android:/root$ ``."""
        return PROMPT_FORMAT.format(
            user=self.user, host=self.host, directory=self.current_directory
        )

    def __repr__(self) -> str:
        return (
            f"Session(user='{self.user}', host='{self.host}', "
            f"current_directory='{self.current_directory}')"
        )
