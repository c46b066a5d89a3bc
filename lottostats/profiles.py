"""
Lottery game profiles.

A profile fixes the number range, how many numbers a draw contains and how
big a suggested ticket is.  The built-in profiles cover the Brazilian games
the historical result files usually come from.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class LotteryProfile:
    key: str
    name: str
    total_numbers: int
    draw_size: int
    bet_size: int
    hot_count: int
    cold_count: int

    def __post_init__(self):
        for field in ("total_numbers", "draw_size", "bet_size", "hot_count", "cold_count"):
            if getattr(self, field) < 1:
                raise ValueError(f"{field} must be at least 1")
        if self.draw_size > self.total_numbers:
            raise ValueError(
                f"draw_size ({self.draw_size}) exceeds total_numbers ({self.total_numbers})"
            )
        if self.bet_size > self.total_numbers:
            raise ValueError(
                f"bet_size ({self.bet_size}) exceeds total_numbers ({self.total_numbers})"
            )
        if max(self.hot_count, self.cold_count) > self.total_numbers:
            raise ValueError("hot_count and cold_count cannot exceed total_numbers")

    @property
    def numbers(self):
        """Every number of the game, ascending."""
        return range(1, self.total_numbers + 1)


PROFILES = {
    "mega_sena": LotteryProfile(
        key="mega_sena", name="Mega-Sena",
        total_numbers=60, draw_size=6, bet_size=6, hot_count=10, cold_count=10,
    ),
    "quina": LotteryProfile(
        key="quina", name="Quina",
        total_numbers=80, draw_size=5, bet_size=5, hot_count=10, cold_count=10,
    ),
    "lotofacil": LotteryProfile(
        key="lotofacil", name="Lotofácil",
        total_numbers=25, draw_size=15, bet_size=15, hot_count=15, cold_count=10,
    ),
    "lotomania": LotteryProfile(
        key="lotomania", name="Lotomania",
        total_numbers=100, draw_size=20, bet_size=50, hot_count=30, cold_count=30,
    ),
}


def get_profile(key: str) -> LotteryProfile:
    """Look up a built-in profile by key."""
    try:
        return PROFILES[key]
    except KeyError:
        raise KeyError(
            f"Unknown lottery '{key}'. Known: {', '.join(sorted(PROFILES))}"
        ) from None
