import pytest

from skirmishlearn.neural import NetworkError, NeuralNetwork
from skirmishlearn.qlearning import DataProvider, QLearning

STATE = [0.2, 0.8, 0.5, 0.1]


class FakeGame(DataProvider):
    def __init__(self, state, reward=0.0, actions=2):
        super().__init__(actions, len(state))
        self.state = state
        self.reward_value = reward
        self.state_calls = 0

    def reward(self):
        return self.reward_value

    def current_state(self):
        self.state_calls += 1
        return self.state


def make(tmp_path, game=None, **kwargs):
    game = game or FakeGame(STATE)
    kwargs.setdefault("seed", 3)
    return QLearning(game, tmp_path / "net_", **kwargs)


def test_network_files_are_created(tmp_path):
    make(tmp_path)
    assert (tmp_path / "net_0").exists()
    assert (tmp_path / "net_1").exists()
    assert not (tmp_path / "net_2").exists()


def test_network_shape_follows_state_size(tmp_path):
    q = make(tmp_path)
    assert [n.layer_sizes for n in q.networks] == [[4, 2, 1], [4, 2, 1]]


def test_learning_rate_reaches_networks(tmp_path):
    q = make(tmp_path, learning_rate=0.2)
    assert all(n.learning_rate == 0.2 for n in q.networks)
    q.learning_rate = 0.05
    assert all(n.learning_rate == 0.05 for n in q.networks)


def test_best_action_is_argmax(tmp_path):
    q = make(tmp_path)
    values = [q.q_value(STATE, a) for a in range(2)]
    assert q.best_action(STATE) == values.index(max(values))


def test_step_without_exploration_returns_best_action(tmp_path):
    q = make(tmp_path, explore_probability=0.0)
    expected = q.best_action(STATE)
    assert q.step() == expected


def test_positive_reward_raises_q_of_taken_action(tmp_path):
    game = FakeGame(STATE, reward=1.0)
    q = make(tmp_path, game=game, explore_probability=0.0)
    action = q.step()
    before = q.q_value(STATE, action)
    q.step()
    assert q.q_value(STATE, action) > before


def test_not_learning_keeps_weights_and_never_explores(tmp_path):
    game = FakeGame(STATE, reward=1.0)
    q = make(tmp_path, game=game, explore_probability=1.0)
    q.is_learning = False
    weights = [[list(n.weights) for n in net] for net in q.networks]
    best = q.best_action(STATE)
    assert [q.step() for _ in range(5)] == [best] * 5
    assert [[list(n.weights) for n in net] for net in q.networks] == weights


def test_full_exploration_stays_in_range(tmp_path):
    game = FakeGame(STATE, actions=3)
    q = make(tmp_path, game=game, explore_probability=1.0)
    actions = {q.step() for _ in range(30)}
    assert actions <= {0, 1, 2}
    assert len(actions) > 1


def test_existing_networks_are_loaded(tmp_path):
    reference = NeuralNetwork([4, 2, 1], seed=11)
    reference.save(tmp_path / "net_0")
    reference.save(tmp_path / "net_1")
    q = make(tmp_path)
    reference.set_input(STATE)
    expected = reference.activate()[0]
    assert q.q_value(STATE, 0) == pytest.approx(expected, abs=1e-5)
    assert q.q_value(STATE, 1) == pytest.approx(expected, abs=1e-5)


def test_mismatched_network_file_is_rejected(tmp_path):
    NeuralNetwork([3, 2, 1], seed=1).save(tmp_path / "net_0")
    with pytest.raises(NetworkError):
        make(tmp_path)


def test_wrong_state_length_is_rejected(tmp_path):
    game = FakeGame(STATE)
    q = make(tmp_path, game=game)
    game.state = [0.1, 0.2]
    with pytest.raises(ValueError):
        q.step()


def test_game_over_before_any_state_is_an_error(tmp_path):
    q = make(tmp_path)
    q.game_over = True
    with pytest.raises(RuntimeError):
        q.step()


def test_game_over_reuses_previous_state(tmp_path):
    game = FakeGame(STATE, reward=-1.0)
    q = make(tmp_path, game=game, explore_probability=0.0)
    q.step()
    q.game_over = True
    q.step()
    assert game.state_calls == 1


def test_seed_makes_steps_reproducible(tmp_path):
    first = make(tmp_path / "a" if (tmp_path / "a").mkdir() is None else tmp_path)
    second = make(tmp_path / "b" if (tmp_path / "b").mkdir() is None else tmp_path)
    assert [first.step() for _ in range(10)] == [second.step() for _ in range(10)]