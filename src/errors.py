"""Error types shared by the editor core"""

from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """A required argument was absent (None) at a public entry point"""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must not be None")


def require_text(value: Optional[Any], argument: str = "text") -> Any:
    """Raise InvalidArgumentError when value is None, otherwise return it unchanged"""
    if value is None:
        raise InvalidArgumentError(argument)
    return value
