"""Neural networks, Q-learning, a grid type and combat heuristics for one-versus-one skirmish agents."""

__version__ = "0.1.0"
__all__ = ["combat", "config", "grid", "neural", "qlearning", "xor_demo"]