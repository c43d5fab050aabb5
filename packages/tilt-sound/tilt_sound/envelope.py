"""One-shot attack/decay envelope."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DecayEnvelope:
    """Linear rise to ``attack_level`` then fall to ``decay_level``.

    Idle until triggered; reads 0 while idle. Retriggering restarts the
    shape from zero.
    """

    attack_time: float = 0.01
    attack_level: float = 0.6
    decay_time: float = 0.2
    decay_level: float = 0.0
    _elapsed: float | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.attack_time < 0.0 or self.decay_time <= 0.0:
            raise ValueError("attack_time must be >= 0 and decay_time > 0")

    @property
    def active(self) -> bool:
        return self._elapsed is not None

    def trigger(self) -> None:
        self._elapsed = 0.0

    def level(self) -> float:
        t = self._elapsed
        if t is None:
            return 0.0
        if t < self.attack_time:
            return self.attack_level * t / self.attack_time
        t -= self.attack_time
        if t < self.decay_time:
            return self.attack_level + (self.decay_level - self.attack_level) * t / self.decay_time
        return self.decay_level

    def advance(self, dt: float) -> float:
        """Move time forward by ``dt`` seconds and return the new level."""
        if self._elapsed is None:
            return 0.0
        self._elapsed += dt
        value = self.level()
        if self._elapsed >= self.attack_time + self.decay_time:
            self._elapsed = None
        return value
