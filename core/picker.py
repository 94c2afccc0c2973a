"""
Non-Repeating Picker.

Responsibility boundaries:
- Produces integers from [0, size) with no repeats until the whole range is used.
- On exhaustion, starts a new pool whose first value is at least two away
  from the last value of the previous pool.
- Draws exclusively from an injected `DrawSource`.

Mutation constraints:
- `seen` is mutated on every `next()` call and cleared by `set_capacity()`.
- Capacity changes only through `set_capacity()`.

Known hazard:
- With size == 1 the post-exhaustion draw can never pass the adjacency filter,
  so `next()` spins forever unless a bounded RetryPolicy is configured or
  `allow_degenerate=False` rejects the size up front.
"""

from numbers import Integral
from typing import Iterator, List, Optional, Tuple

from config.config import PickerConfig
from core.retry_policy import UNBOUNDED, RetryExhaustedError, RetryPolicy, draw_until
from utils.logger import AuditLogger
from utils.rng import CentralizedRNG, DrawSource

__all__ = [
    "NonRepeatingPicker",
    "InvalidArgumentError",
    "DegeneratePoolError",
    "RetryExhaustedError",
    "create",
]


class InvalidArgumentError(ValueError):
    pass


class DegeneratePoolError(ValueError):
    pass


def _validate_count(value, name: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {value}")
    return int(value)


class NonRepeatingPicker:
    """
    Stateful generator of spread-out, non-repeating integers over a fixed range.
    """

    def __init__(
        self,
        size: int,
        rng: Optional[DrawSource] = None,
        retry_policy: RetryPolicy = UNBOUNDED,
        allow_degenerate: bool = True,
        logger: Optional[AuditLogger] = None,
    ) -> None:
        """
        Args:
            size: Exclusive upper bound of the value range.
            rng: Uniform source with `draw(n)`; a fresh CentralizedRNG if omitted.
            retry_policy: Bound on draws per `next()` call.
            allow_degenerate: Whether size == 1 is accepted.
            logger: Optional audit sink for draws and resets.
        """
        self._allow_degenerate = allow_degenerate
        self._size = self._check_size(size)
        self._seen: List[int] = []
        self._rng = rng if rng is not None else CentralizedRNG()
        self._retry_policy = retry_policy
        self._logger = logger

    def _check_size(self, size: int) -> int:
        size = _validate_count(size, "size", 1)
        if size == 1 and not self._allow_degenerate:
            raise DegeneratePoolError(
                "size == 1 leaves no value outside the adjacency window after exhaustion."
            )
        return size

    @property
    def size(self) -> int:
        return self._size

    @property
    def seen(self) -> Tuple[int, ...]:
        """Values produced since the last reset, oldest first."""
        return tuple(self._seen)

    @property
    def last(self) -> Optional[int]:
        return self._seen[-1] if self._seen else None

    @property
    def exhausted(self) -> bool:
        return len(self._seen) >= self._size

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    def set_capacity(self, size: int) -> None:
        """
        Replace the capacity and forget every value seen so far.
        """
        new_size = self._check_size(size)
        old_size, dropped = self._size, len(self._seen)
        self._size = new_size
        self._seen = []
        self._log("capacity_changed", {"old_size": old_size, "new_size": new_size, "dropped": dropped})

    def next(self) -> int:
        """
        Return the next value in [0, size).

        Raises:
            RetryExhaustedError: if the retry policy is bounded and ran out.
        """
        if self.exhausted:
            last = self._seen[-1]
            # raw neighbours, no wraparound at 0 or size - 1
            value, attempts = draw_until(
                self._draw,
                lambda r: r != last and r != last - 1 and r != last + 1,
                self._retry_policy,
            )
            self._seen = [value]
            self._log("pool_reset", {"size": self._size, "last": last, "value": value, "attempts": attempts})
            return value

        seen = set(self._seen)
        value, attempts = draw_until(self._draw, lambda r: r not in seen, self._retry_policy)
        self._seen.append(value)
        self._log("draw", {"value": value, "attempts": attempts, "seen": len(self._seen)})
        return value

    def draw_many(self, count: int) -> List[int]:
        """Return `count` successive values."""
        count = _validate_count(count, "count", 0)
        return [self.next() for _ in range(count)]

    def _draw(self) -> int:
        return self._rng.draw(self._size)

    def _log(self, event_type: str, data: dict) -> None:
        if self._logger is not None:
            self._logger.log_event(event_type, data)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"NonRepeatingPicker(size={self._size}, seen={len(self._seen)})"


def create(
    size: int,
    rng: Optional[DrawSource] = None,
    config: Optional[PickerConfig] = None,
    logger: Optional[AuditLogger] = None,
) -> NonRepeatingPicker:
    """
    Build a picker of the given capacity.

    Without an explicit `rng`, a CentralizedRNG seeded from `config.seed` is used.
    Passing both an `rng` and a seeded config is rejected, since the seed would be ignored.
    """
    config = config or PickerConfig()
    if rng is not None and config.seed is not None:
        raise InvalidArgumentError("Pass either rng or config.seed, not both.")
    if rng is None:
        rng = CentralizedRNG(seed=config.seed)
    return NonRepeatingPicker(
        size,
        rng=rng,
        retry_policy=config.retry_policy(),
        allow_degenerate=config.allow_degenerate,
        logger=logger,
    )
