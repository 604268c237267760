from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
INV_A = 1407677000  # (A * INV_A) % M == 1

def pm_next(state: int) -> int:
    return (state * A) % M

# step backward one state
def pm_prev(state: int) -> int:
    return (state * INV_A) % M

def normalize_seed(seed: int) -> int:
    """Fold any integer into the valid state range 1..M-1 (0 is a fixed point)."""
    s = int(seed) % M
    return s if s else 1

@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator.
    One instance is one stream; every draw advances it by exactly one state,
    so a fixed seed plus a fixed call sequence always replays the same values.
    """
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(seed)

    def reset(self, seed: int) -> None:
        self.state = normalize_seed(seed)

    def fork(self) -> "PMRandom":
        return PMRandom(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # state is 1..M-1, so this lands in [0, 1)
        return (self.next32() - 1) / (M - 1)

    def below(self, n: int) -> int:
        """floor(random() * n), i.e. 0..n-1."""
        if n <= 0:
            raise ValueError(f"below() needs n > 0, got {n}")
        return min(int(self.random() * n), n - 1)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.below(len(items))]
