"""A small feed-forward sigmoid network trained with backpropagation and momentum."""

from __future__ import annotations

import math
import random
from pathlib import Path
from typing import Iterable, Iterator, Sequence, TextIO

BIAS_INPUT = -1.0
DEFAULT_LEARNING_RATE = 0.1
DEFAULT_MOMENTUM = 0.0
LOADED_LEARNING_RATE = 0.9
LOADED_MOMENTUM = 0.5


class NetworkError(ValueError):
    """Raised for an invalid network shape, argument or network file."""


def _sigmoid(value: float) -> float:
    if value >= 0:
        return 1.0 / (1.0 + math.exp(-value))
    exp_value = math.exp(value)
    return exp_value / (1.0 + exp_value)


def _next_float(tokens: Iterator[str]) -> float:
    try:
        return float(next(tokens))
    except StopIteration:
        raise NetworkError("network file ended too early") from None
    except ValueError as exc:
        raise NetworkError(f"bad number in network file: {exc}") from None


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise NetworkError("network file ended too early") from None
    except ValueError as exc:
        raise NetworkError(f"bad integer in network file: {exc}") from None


class Neuron:
    """A sigmoid neuron with a trailing bias input fixed at -1."""

    def __init__(self, number_of_inputs: int) -> None:
        if number_of_inputs < 1:
            raise NetworkError("invalid number of inputs")
        size = number_of_inputs + 1
        self.inputs: list[float] = [0.0] * number_of_inputs + [BIAS_INPUT]
        self.weights: list[float] = [0.0] * size
        self.old_weights: list[float] = [0.0] * size
        self.output: float = 0.0

    @property
    def number_of_inputs(self) -> int:
        """Number of inputs including the bias."""
        return len(self.weights)

    def initialize_weights(self, rng: random.Random) -> None:
        """Give every weight a random value in {±0.1, ..., ±1.0}."""
        for i in range(self.number_of_inputs):
            weight = (rng.randrange(10) + 1) * 0.1
            self.old_weights[i] = weight
            if rng.randrange(2) == 0:
                weight = -weight
            self.weights[i] = weight

    def set_weights(self, weights: Sequence[float]) -> None:
        """Replace the weights (bias weight last); previous weights are kept."""
        if len(weights) != self.number_of_inputs:
            raise NetworkError(
                f"expected {self.number_of_inputs} weights, got {len(weights)}"
            )
        self.weights = [float(w) for w in weights]

    def set_input(self, index: int, value: float) -> None:
        self.inputs[index] = float(value)

    def activate(self) -> float:
        """Compute and return the neuron's output."""
        total = sum(i * w for i, w in zip(self.inputs, self.weights))
        self.output = _sigmoid(total)
        return self.output

    def output_delta(self, expected: float) -> float:
        """Error term of an output-layer neuron."""
        return -(expected - self.output) * self.output * (1 - self.output)

    def hidden_delta(
        self, next_deltas: Sequence[float], next_layer: Sequence["Neuron"], index: int
    ) -> float:
        """Error term of a hidden neuron at position ``index`` in its layer."""
        total = sum(d * n.weights[index] for d, n in zip(next_deltas, next_layer))
        return total * self.output * (1 - self.output)

    def update_weight(self, index: int, delta: float, momentum: float) -> None:
        """Add ``delta`` plus momentum times the last change to one weight."""
        if not 0 <= index < self.number_of_inputs:
            raise NetworkError("invalid update weight index")
        previous = self.weights[index]
        self.weights[index] += delta + momentum * (previous - self.old_weights[index])
        self.old_weights[index] = previous

    def save(self, stream: TextIO) -> None:
        """Write the weights and previous weights as two lines."""
        stream.write("".join(f"{w:f} " for w in self.weights) + "\n")
        stream.write("".join(f"{w:f} " for w in self.old_weights) + "\n")

    def load(self, tokens: Iterator[str]) -> None:
        """Read weights then previous weights from a token stream."""
        size = self.number_of_inputs
        self.weights = [_next_float(tokens) for _ in range(size)]
        self.old_weights = [_next_float(tokens) for _ in range(size)]

    def describe(self) -> str:
        inputs = "".join(f"{v:f}, " for v in self.inputs)
        weights = "".join(f"{w:f}, " for w in self.weights)
        return f"Inputs: {inputs}\nWeights: {weights}\nOutput: {self.output:f}\n"


class NeuralNetwork:
    """Layered network; ``layer_sizes`` lists the input layer, hidden layers and output layer."""

    def __init__(
        self,
        layer_sizes: Sequence[int],
        initial_weights: Sequence[float] | None = None,
        seed: int | None = None,
    ) -> None:
        sizes = [int(s) for s in layer_sizes]
        if len(sizes) < 3:
            raise NetworkError("invalid number of layers")
        for index, size in enumerate(sizes):
            if size < 1:
                raise NetworkError(f"invalid number of neurons at layer: {index}")
        self.layer_sizes = sizes
        self.learning_rate = DEFAULT_LEARNING_RATE
        self.momentum = DEFAULT_MOMENTUM
        rng = random.Random(seed)

        if initial_weights is not None:
            needed = sum((prev + 1) * cur for prev, cur in zip(sizes, sizes[1:]))
            if len(initial_weights) != needed:
                raise NetworkError(
                    f"expected {needed} initial weights, got {len(initial_weights)}"
                )
        offset = 0
        self.layers: list[list[Neuron]] = []
        for previous, current in zip(sizes, sizes[1:]):
            layer = []
            for _ in range(current):
                neuron = Neuron(previous)
                neuron.initialize_weights(rng)
                if initial_weights is not None:
                    neuron.set_weights(initial_weights[offset : offset + previous + 1])
                    offset += previous + 1
                layer.append(neuron)
            self.layers.append(layer)

    @property
    def input_size(self) -> int:
        return self.layer_sizes[0]

    def set_input(self, inputs: Sequence[float]) -> None:
        """Feed the input vector to every neuron of the first layer."""
        if len(inputs) != self.input_size:
            raise NetworkError(f"expected {self.input_size} inputs, got {len(inputs)}")
        for neuron in self.layers[0]:
            for index, value in enumerate(inputs):
                neuron.set_input(index, value)

    def activate(self) -> list[float]:
        """Propagate the current inputs forward and return the outputs."""
        for layer, following in zip(self.layers, self.layers[1:] + [None]):
            for index, neuron in enumerate(layer):
                value = neuron.activate()
                if following is not None:
                    for target in following:
                        target.set_input(index, value)
        return self.outputs()

    def outputs(self) -> list[float]:
        return [neuron.output for neuron in self.layers[-1]]

    def backpropagate(self, expected: Sequence[float]) -> None:
        """Adjust all weights towards ``expected`` for the last activation."""
        output_layer = self.layers[-1]
        if len(expected) != len(output_layer):
            raise NetworkError(
                f"expected {len(output_layer)} target values, got {len(expected)}"
            )
        rate = self.learning_rate
        deltas = [n.output_delta(e) for n, e in zip(output_layer, expected)]
        changes: list[list[list[float]]] = [[] for _ in self.layers]
        changes[-1] = [
            [-rate * d * x for x in n.inputs] for n, d in zip(output_layer, deltas)
        ]
        for level in range(len(self.layers) - 2, -1, -1):
            following = self.layers[level + 1]
            deltas = [
                n.hidden_delta(deltas, following, i)
                for i, n in enumerate(self.layers[level])
            ]
            changes[level] = [
                [-rate * d * x for x in n.inputs]
                for n, d in zip(self.layers[level], deltas)
            ]
        for layer, layer_changes in zip(self.layers, changes):
            for neuron, neuron_changes in zip(layer, layer_changes):
                for index, change in enumerate(neuron_changes):
                    neuron.update_weight(index, change, self.momentum)

    def save(self, path: str | Path) -> None:
        """Write the network's shape and weights to a text file."""
        with open(path, "w", encoding="ascii") as stream:
            stream.write(f"{len(self.layer_sizes)} \n")
            stream.write("".join(f"{s} " for s in self.layer_sizes) + "\n")
            for layer in self.layers:
                for neuron in layer:
                    neuron.save(stream)

    @classmethod
    def load(cls, path: str | Path) -> "NeuralNetwork":
        """Read a network written by :meth:`save`."""
        with open(path, encoding="ascii") as stream:
            tokens = iter(stream.read().split())
        count = _next_int(tokens)
        if count < 3:
            raise NetworkError("invalid number of layers")
        sizes = []
        for index in range(count):
            size = _next_int(tokens)
            if size < 1:
                raise NetworkError(f"invalid number of neurons at layer: {index}")
            sizes.append(size)
        network = cls(sizes)
        for layer in network.layers:
            for neuron in layer:
                neuron.load(tokens)
        network.learning_rate = LOADED_LEARNING_RATE
        network.momentum = LOADED_MOMENTUM
        return network

    def describe(self) -> str:
        return "".join(n.describe() for layer in self.layers for n in layer)

    def __iter__(self) -> Iterable[Neuron]:
        return (n for layer in self.layers for n in layer)