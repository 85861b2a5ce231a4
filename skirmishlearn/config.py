"""Training-run settings kept in a small "name value" text file, and the per-step reward."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DAMAGE_TAKEN_REWARD = -0.01
DAMAGE_DEALT_REWARD = 0.1

_KEYS = {
    "s_localSpeed": "local_speed",
    "is_learning": "is_learning",
    "max_learning_iterations": "max_learning_iterations",
    "max_testing_iterations": "max_testing_iterations",
    "curr_iteration": "current_iteration",
}


@dataclass
class TrainingConfig:
    """Game speed, learning switch and the learning/testing iteration schedule."""

    local_speed: int = 0
    is_learning: bool = True
    max_learning_iterations: int = 0
    max_testing_iterations: int = 0
    current_iteration: int = 0

    @classmethod
    def load(cls, path: str | Path) -> "TrainingConfig":
        """Read ``name value`` pairs; unknown names are ignored, missing ones keep defaults."""
        with open(path, encoding="ascii") as stream:
            tokens = stream.read().split()
        if len(tokens) % 2:
            raise ValueError(f"setting {tokens[-1]!r} in {path} has no value")
        config = cls()
        for name, raw in zip(tokens[::2], tokens[1::2]):
            try:
                value = int(raw)
            except ValueError:
                raise ValueError(f"bad value {raw!r} for {name!r} in {path}") from None
            field = _KEYS.get(name)
            if field is None:
                continue
            setattr(config, field, bool(value) if field == "is_learning" else value)
        return config

    def save(self, path: str | Path) -> None:
        """Write the settings in the format :meth:`load` reads."""
        text = (
            f"s_localSpeed {self.local_speed}\n"
            f"is_learning {int(self.is_learning)}\n"
            f"max_learning_iterations {self.max_learning_iterations}\n"
            f"max_testing_iterations {self.max_testing_iterations}\n"
            f"curr_iteration {self.current_iteration}"
        )
        with open(path, "w", encoding="ascii") as stream:
            stream.write(text)

    def advance(self) -> int:
        """Move on to the next iteration and return its number."""
        self.current_iteration += 1
        return self.current_iteration

    def is_evaluation_round(self) -> bool:
        """True when the current iteration falls in the testing part of the cycle."""
        cycle = self.max_learning_iterations + self.max_testing_iterations
        if cycle <= 0:
            raise ValueError("learning and testing iterations add up to nothing")
        return self.current_iteration % cycle >= self.max_learning_iterations


def hp_change_reward(
    old_own_hp: int, new_own_hp: int, old_enemy_hp: int, new_enemy_hp: int
) -> float:
    """Reward for the last step: hitting the enemy outweighs being hit."""
    reward = 0.0
    if new_own_hp < old_own_hp:
        reward = DAMAGE_TAKEN_REWARD
    if new_enemy_hp < old_enemy_hp:
        reward = DAMAGE_DEALT_REWARD
    return reward