[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shardstream"
version = "0.1.0"
description = "Key and order data records into shards and stream them to an asynchronous consumer"
requires-python = ">=3.10"
keywords = ["sharding", "asyncio", "stream", "aiohttp", "microservice"]
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
    "Framework :: aiohttp",
    "Topic :: Database",
]
dependencies = [
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["shardstream"]

[tool.pytest.ini_options]
addopts = "-ra"
