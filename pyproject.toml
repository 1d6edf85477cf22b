[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feeless"
version = "0.1.0"
description = "Nano network protocol primitives: message headers, wire messages, proof of work and in-memory node state."
requires-python = ">=3.10"
dependencies = []
keywords = ["nano", "cryptocurrency", "protocol", "proof-of-work", "block-lattice"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["feeless"]

[tool.pytest.ini_options]
addopts = "-ra"
