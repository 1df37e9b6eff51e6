"""Errors raised for invalid dice notation."""


class DiceParseError(ValueError):
    """Error parsing dice notation."""

    pass


class DiceLexError(DiceParseError):
    """Unrecognized character in dice notation.

    Attributes:
        char: The offending character.
        position: Zero-based position in the normalized input.
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character '{char}' at position {position}")


class DiceSyntaxError(DiceParseError):
    """Structurally invalid sequence of notation tokens."""

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        super().__init__(message)
