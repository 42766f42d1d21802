from typing import Protocol, Sequence, TypeVar


class Rankable(Protocol):
    mention_count: int
    first_position_ratio: float


T = TypeVar("T", bound=Rankable)


def rank(matches: Sequence[T], max_results: int = 20) -> list[T]:
    """Most mentioned first, earlier first mention breaks ties, input order after that."""
    if max_results <= 0:
        return []
    ordered = sorted(matches, key=_rank_key)
    return ordered[:max_results]


def _rank_key(match: Rankable) -> tuple[int, float]:
    return -match.mention_count, match.first_position_ratio
