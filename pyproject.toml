[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uds"
version = "1.0.0"
description = "Building blocks for a traffic-separating TCP relay: in-memory streams, binary reading, file helpers, INI parsing, a configuration model, a deterministic PRNG and a password-keyed AES encryptor."
requires-python = ">=3.10"
keywords = ["networking", "relay", "ini", "configuration", "stream", "encryption", "prng"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["uds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
