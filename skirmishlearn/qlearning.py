"""Q-learning with one small neural network per action approximating Q(state, action)."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from skirmishlearn.neural import NetworkError, NeuralNetwork


class DataProvider(ABC):
    """Source of states and rewards for a learner."""

    def __init__(self, number_of_actions: int, state_size: int) -> None:
        self.number_of_actions = number_of_actions
        self.state_size = state_size

    @abstractmethod
    def reward(self) -> float:
        """Reward earned by the previous action."""

    @abstractmethod
    def current_state(self) -> Sequence[float]:
        """The current state; the learner keeps its own copy."""


class QLearning:
    """Chooses actions epsilon-greedily and trains its networks from rewards."""

    def __init__(
        self,
        game: DataProvider,
        network_file: str | Path,
        discount_factor: float = 0.9,
        learning_rate: float = 0.1,
        explore_probability: float = 0.3,
        seed: int | None = None,
    ) -> None:
        self.game = game
        self.network_file = str(network_file)
        self.discount_factor = discount_factor
        self.explore_probability = explore_probability
        self.is_learning = True
        self.game_over = False
        self._rng = random.Random(seed)
        self._previous_state: list[float] | None = None
        self._previous_action: int | None = None

        sizes = [game.state_size, int(game.state_size / 2.0), 1]
        self.networks: list[NeuralNetwork] = []
        for action in range(game.number_of_actions):
            network = NeuralNetwork(sizes, seed=self._rng.getrandbits(32))
            path = self._network_path(action)
            try:
                loaded = NeuralNetwork.load(path)
            except FileNotFoundError:
                pass
            else:
                if loaded.layer_sizes != sizes:
                    raise NetworkError(
                        f"network in {path} has layers {loaded.layer_sizes}, "
                        f"expected {sizes}"
                    )
                network = loaded
            network.save(path)
            self.networks.append(network)
        self._learning_rate = learning_rate
        self.learning_rate = learning_rate

    def _network_path(self, action: int) -> str:
        return f"{self.network_file}{action}"

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        self._learning_rate = value
        for network in self.networks:
            network.learning_rate = value

    def save_networks(self) -> None:
        """Write every action's network to its file."""
        for action, network in enumerate(self.networks):
            network.save(self._network_path(action))

    def q_value(self, state: Sequence[float], action: int) -> float:
        """Estimated value of taking ``action`` in ``state``."""
        network = self.networks[action]
        network.set_input(state)
        return network.activate()[0]

    def best_action(self, state: Sequence[float]) -> int:
        """The action with the highest estimated value; the first one on ties."""
        best, best_q = -1, -math.inf
        for action in range(self.game.number_of_actions):
            value = self.q_value(state, action)
            if value > best_q:
                best, best_q = action, value
        return best

    def step(self) -> int:
        """Train on the last transition (when learning) and pick the next action."""
        train = self._previous_action is not None
        if not self.game_over:
            state = [float(v) for v in self.game.current_state()]
            if len(state) != self.game.state_size:
                raise ValueError(
                    f"expected a state of {self.game.state_size} values, got {len(state)}"
                )
        elif self._previous_state is None:
            raise RuntimeError("game is over before any state was seen")
        else:
            state = self._previous_state

        best = self.best_action(state)
        action = best

        if self.is_learning and train:
            reward = self.game.reward()
            max_q = self.q_value(state, best)
            network = self.networks[self._previous_action]
            network.set_input(self._previous_state)
            network.activate()
            network.backpropagate([reward + self.discount_factor * max_q])

        if self.is_learning and self.explore_probability > self._rng.random():
            action = self._rng.randrange(self.game.number_of_actions)

        self._previous_action = action
        self._previous_state = state
        self.save_networks()
        return action