[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pa55vault"
version = "0.1.0"
description = "A small command-line password generator that keeps encrypted entries in a JSON vault file"
requires-python = ">=3.10"
keywords = ["password", "generator", "vault", "cli", "aes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pa55 = "pa55vault.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pa55vault"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
