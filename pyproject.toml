[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeclight"
version = "0.1.0"
description = "Light wallet building blocks: Sapling tree checkpoints, client configuration, wallet options, send progress and chain state."
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["zcash", "wallet", "light client", "sapling", "checkpoints"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zeclight"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
