"""
Retry Policy for candidate draws.

Responsibility boundaries:
- Repeats a draw until a candidate is accepted.
- Optionally bounds the number of draws and fails loudly when the bound is hit.

Mutation constraints:
- Policies are immutable; the loop itself holds no state between calls.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple


class RetryExhaustedError(RuntimeError):
    pass


@dataclass(frozen=True)
class RetryPolicy:
    """
    Upper bound on draws per accepted value. None means retry forever.
    """
    max_attempts: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1 or None, got {self.max_attempts}")

    @property
    def bounded(self) -> bool:
        return self.max_attempts is not None


UNBOUNDED = RetryPolicy()


def draw_until(draw: Callable[[], int], accept: Callable[[int], bool], policy: RetryPolicy = UNBOUNDED) -> Tuple[int, int]:
    """
    Draw candidates until `accept` passes one.

    Returns:
        The accepted value and the number of draws it took.

    Raises:
        RetryExhaustedError: if `policy` is bounded and every allowed draw was rejected.
    """
    attempts = 0
    while True:
        candidate = draw()
        attempts += 1
        if accept(candidate):
            return candidate, attempts
        if policy.bounded and attempts >= policy.max_attempts:
            raise RetryExhaustedError(
                f"No acceptable value after {attempts} draws (last candidate {candidate})."
            )
