"""Small helpers and game-wide constants."""

MIN_PLAYER_COUNT = 2
MAX_PLAYER_COUNT = 6
STANDARD_BOARD_SIZE = 11

COTTAGE_RENT_INCREASE = 0.15
CASTLE_RENT_INCREASE = 0.5

TAX_COLOR = 90
_RESET = "\033[0m"


def colorize(text: str, color: int) -> str:
    """Wrap ``text`` in an ANSI colour sequence and reset afterwards."""
    return f"\033[{int(color)}m{text}{_RESET}"


def two_to_power(power: int) -> int:
    """Return 2 raised to a non-negative integer power."""
    if power < 0:
        raise ValueError("power must not be negative")
    return 1 << power


def taxing_message() -> str:
    """The coloured notice shown when a player has paid rent or tax."""
    return colorize("You have been taxed\n", TAX_COLOR)