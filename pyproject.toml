[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skirmishlearn"
version = "0.1.0"
description = "Small feed-forward neural networks, Q-learning and combat heuristics for one-versus-one unit skirmishes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neural network",
    "backpropagation",
    "q-learning",
    "reinforcement learning",
    "game ai",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skirmishlearn-xor = "skirmishlearn.xor_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["skirmishlearn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
