[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paraledger"
version = "0.1.0"
description = "Chain primitives, asset registry types, token imbalances and balance adapters for a parachain ledger"
requires-python = ">=3.10"
dependencies = []
keywords = ["ledger", "parachain", "tokens", "imbalance", "existential-deposit"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["paraledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
