[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laks"
version = "0.1.0"
description = "A tiny integer-arithmetic language: tokeniser, parser, bytecode compiler and stack machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "bytecode", "compiler", "virtual machine", "toy language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
laks = "laks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["laks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
