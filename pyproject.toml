[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "shellx"
version = "0.1.0"
description = "A small interactive shell that tokenizes lines and runs piped commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipeline", "tokenizer", "repl", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shellx = "shellx.shell:main"

[tool.setuptools.packages.find]
include = ["shellx*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
