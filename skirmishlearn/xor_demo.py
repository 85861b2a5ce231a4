"""Train a small network on the exclusive-or problem and report progress."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from skirmishlearn.neural import NeuralNetwork

XOR_INPUTS = [(1.0, 1.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0)]
XOR_EXPECTED = [(0.0,), (1.0,), (1.0,), (0.0,)]
LAYERS = (2, 3, 2, 1)


def train_xor(
    epochs: int = 100000,
    report_every: int = 500,
    seed: int | None = None,
    stream: TextIO | None = None,
) -> NeuralNetwork:
    """Train on XOR for ``epochs`` epochs, writing progress to ``stream``."""
    out = sys.stdout if stream is None else stream
    network = NeuralNetwork(LAYERS, seed=seed)
    for epoch in range(epochs):
        out.write(f"##### EPOCH {epoch}\n")
        report = report_every > 0 and (epoch + 1) % report_every == 0
        for inputs, expected in zip(XOR_INPUTS, XOR_EXPECTED):
            if report:
                out.write("INPUTS: " + "".join(f"{v:f} " for v in inputs) + "\n")
            network.set_input(inputs)
            outputs = network.activate()
            if report:
                out.write("OUTPUTS: " + "".join(f"{v:f}" for v in outputs) + "\n")
            network.backpropagate(expected)
            if report:
                out.write(
                    "EXPECTED OUTPUTS: " + "".join(f"{v:f}" for v in expected) + "\n"
                )
    return network


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Train a network on XOR.")
    parser.add_argument("--epochs", type=int, default=100000)
    parser.add_argument("--report-every", type=int, default=500)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default="file.txt", help="where to save the network")
    args = parser.parse_args(argv)
    network = train_xor(args.epochs, args.report_every, args.seed)
    network.save(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())