"""Retry policy for transient transport failures."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded exponential backoff.

    ``max_attempts`` counts every try, the first one included.
    After failed attempt ``n`` (starting at 1) the executor waits
    ``base_delay * 2 ** n`` seconds.
    """

    max_attempts: int = 3
    base_delay: float = 0.5

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.base_delay < 0:
            raise ValueError("base_delay must be >= 0")

    def delay_for(self, attempt: int) -> float:
        return self.base_delay * (2 ** attempt)

    def should_retry(self, attempt: int) -> bool:
        return attempt < self.max_attempts
