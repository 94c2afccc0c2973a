"""
Picker Configuration.

Responsibility boundaries:
- Holds the seed, retry bound and degenerate-pool handling for a picker.
- Must be passed to `create()` to take effect.

Mutation constraints:
- Must freeze after initialization to avoid mid-run configuration drift.
"""

from dataclasses import dataclass
from typing import Optional

from core.retry_policy import RetryPolicy


@dataclass(frozen=True)
class PickerConfig:
    """
    Immutable container defining how a picker is built.
    """
    # None seeds from system entropy
    seed: Optional[int] = None
    # None keeps the retry loop unbounded
    max_attempts: Optional[int] = None
    # False rejects size == 1, whose post-exhaustion draw can never succeed
    allow_degenerate: bool = True

    def __post_init__(self) -> None:
        self.retry_policy()

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(self.max_attempts)
