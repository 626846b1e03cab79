from typing import Literal

ErrorLevel = Literal["Lexicon", "Parse"]


class ExpressionSyntaxError(ValueError):
    """Raised when source text cannot be tokenized or parsed."""

    def __init__(self, message: str, level: ErrorLevel) -> None:
        super().__init__(message)
        self.message = message
        self.level: ErrorLevel = level

    @classmethod
    def lexicon(cls, message: str) -> "ExpressionSyntaxError":
        return cls(message, "Lexicon")

    @classmethod
    def parse(cls, message: str) -> "ExpressionSyntaxError":
        return cls(message, "Parse")

    def __str__(self) -> str:
        return f"{self.level} Error {self.message}"
