from typing import Iterable


class EmptyInputError(ValueError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__("Input cannot be empty" + (f": {message}" if message else ""))
        self.message = message


class StrictDecodeError(ValueError):
    def __init__(self, position: int, message: str) -> None:
        super().__init__(f"Invalid JSON string body at position {position}: {message}")
        self.position = position
        self.message = message


class UnsupportedLanguageError(ValueError):
    def __init__(self, language: str, supported: Iterable[str]) -> None:
        super().__init__(
            f"Unsupported language '{language}'. Language must be one of: {', '.join(supported)}."
        )
        self.language = language
