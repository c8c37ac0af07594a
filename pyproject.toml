[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runeshell"
version = "0.1.0"
description = "A small interactive Unix shell with built-in commands and pipelines"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipeline", "command-line", "unix", "repl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
runeshell = "runeshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["runeshell"]

[tool.pytest.ini_options]
addopts = "-ra"
