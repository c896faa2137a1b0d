[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "investimentos"
version = "0.1.0"
description = "Interactive investment management system: accounts, portfolios and orders stored in SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["investment", "portfolio", "orders", "sqlite", "console", "cpf"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
investimentos = "investimentos.cli:main"

[tool.setuptools.packages.find]
include = ["investimentos*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
