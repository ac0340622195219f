[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "wordshell"
version = "0.1.0"
description = "A small Unix-style command shell with a greedy metacharacter word lexer"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "redirection", "command line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
wordshell = "wordshell.shell:main"
wordshell-words = "wordshell.cli:main"

[tool.setuptools.packages.find]
include = ["wordshell*"]

[tool.pytest.ini_options]
addopts = "-ra"
