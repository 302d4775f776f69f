[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kadroute"
version = "0.1.0"
description = "Kademlia-style routing table, coalescing asyncio timer and byte-keyed value store for DHT nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["dht", "kademlia", "routing-table", "k-bucket", "peer-to-peer", "asyncio"]
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
    "Framework :: AsyncIO",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["kadroute"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
