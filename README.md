# skirmishlearn

Learning components for a one-versus-one unit skirmish agent. The package
has no third-party dependencies.

- `skirmishlearn.neural`: a small multi-layer perceptron with sigmoid
  neurons, a bias input fixed at -1 per neuron, backpropagation with
  momentum and a plain-text save/load format (`NeuralNetwork`, `Neuron`,
  `NetworkError`).
- `skirmishlearn.xor_demo`: trains a network on the exclusive-or problem
  (`train_xor`, and `main` behind the `skirmishlearn-xor` command).
- `skirmishlearn.qlearning`: Q-learning with one network per action
  (`QLearning`), driven by a game that implements `DataProvider`.
- `skirmishlearn.grid`: a two-dimensional `RectangleArray` with fill,
  border and text-rendering helpers.
- `skirmishlearn.combat`: damage and fitness arithmetic
  (`shots_to_death`, `potential_damage`, `hp_fitness`, `choose_action`,
  `withdraw_target`, `DamageType`, `UnitSize`).
- `skirmishlearn.config`: the training-run settings file
  (`TrainingConfig`) and the per-step hit-point reward
  (`hp_change_reward`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Neural networks

```python
from skirmishlearn.neural import NeuralNetwork

net = NeuralNetwork([2, 3, 2, 1], seed=1)
net.set_input([1.0, 0.0])
outputs = net.activate()      # also available later as net.outputs()
net.backpropagate([1.0])
net.save("xor.net")

restored = NeuralNetwork.load("xor.net")
```

`layer_sizes` lists the input layer first and the output layer last. At
least three layers are required (so at least one hidden layer) and every
layer must hold at least one neuron; otherwise `NetworkError` is raised.
`NetworkError` is also raised for a wrong number of inputs, target values
or initial weights, and for a malformed network file.

Weights start at random values in ±0.1 … ±1.0, drawn from a generator
seeded with `seed`. `initial_weights`, if given, replaces them: one value
per input plus one bias weight for every neuron, layer by layer.

A new network has `learning_rate` 0.1 and `momentum` 0.0. A network read
with `NeuralNetwork.load` gets `learning_rate` 0.9 and `momentum` 0.5.
`describe()` returns a text dump of every neuron's inputs, weights and
output.

## XOR demonstration

```
skirmishlearn-xor --epochs 20000 --report-every 500 --seed 3 --output xor.net
```

Trains a 2-3-2-1 network on XOR, printing `##### EPOCH n` for every epoch
and the inputs, outputs and expected outputs every `--report-every`
epochs (0 turns those reports off), then saves the network to `--output`
(default `file.txt`). Defaults are 100000 epochs and a report every 500.
From Python, `skirmishlearn.xor_demo.train_xor(epochs, report_every, seed,
stream)` runs the same training, writes to `stream` (standard output by
default) and returns the trained network.

## Q-learning

Subclass `DataProvider`, passing the number of actions and the state size
to its constructor, and implement `reward()` and `current_state()`. Hand
it to `QLearning` together with a base file name:

```python
from skirmishlearn.qlearning import QLearning

learner = QLearning(game, "qnet_", discount_factor=0.95,
                    learning_rate=0.2, explore_probability=0.05, seed=7)
action = learner.step()
```

Each action has a network of shape `[state_size, state_size // 2, 1]`, so
the state size must be at least 2. Its file is the base name with the
action number appended; an existing file is loaded (a `NetworkError` is
raised if its layer sizes differ), otherwise a new network is created, and
either way it is written back.

`step()` reads the current state, and while `is_learning` is on trains the
previous action's network towards `reward + discount_factor * Q(state,
best action)`. It returns the best action, or with probability
`explore_probability` (while learning) a random one, and saves all
networks after every step. Set `game_over = True` before the final step to
train on the last seen state instead of asking the game for a new one.
`best_action(state)` and `q_value(state, action)` can be called directly;
setting `learning_rate` updates every network.

## Grid

`RectangleArray(width, height, fill)` is indexed as `grid[x, y]`;
`grid[x]` returns column `x`. Out-of-range indices raise `IndexError`.
`resize` resets the contents unless the size is unchanged; `set_to` and
`set_border_to` fill all cells or the outer border; `render()` gives one
line per row (integers are written as character codes) and
`save_to_file(path)` writes that text.

## Combat helpers

- `shots_to_death(hp, damage)`: hits needed, rounded up; damage must be
  positive.
- `potential_damage(damage_amount, target_armor, target_size,
  damage_type)`: `(damage - armor)` times 0.5 (concussive on medium), 0.25
  (concussive on large), 0.5 (explosive on small), 0.75 (explosive on
  medium) or 1.
- `hp_fitness(own_hp, enemy_hp, own_max_hp, enemy_max_hp)`: hit-point
  difference divided by the larger maximum.
- `choose_action(outputs)`: index chosen from exactly three network
  outputs.
- `withdraw_target(my_position, enemy_position)`: a point 100 units
  further away from the enemy, clamped to non-negative coordinates.

## Training configuration

`TrainingConfig.load(path)` reads `name value` pairs (`s_localSpeed`,
`is_learning`, `max_learning_iterations`, `max_testing_iterations`,
`curr_iteration`). Unknown names are ignored and missing ones keep their
defaults. `save(path)` writes the same format, `advance()` increments the
current iteration, and `is_evaluation_round()` tells whether the current
iteration falls in the testing part of the learning/testing cycle.
`hp_change_reward` returns 0.1 when the enemy lost hit points, otherwise
-0.01 when the own unit did, otherwise 0.

## What this package does not do

It does not connect to a game or control units. It supplies the learning
and arithmetic pieces; reading unit states, issuing move and attack
orders, and running matches are left to the code that uses it.