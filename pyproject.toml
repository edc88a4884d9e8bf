[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "banco"
version = "0.1.0"
description = "A small bank ledger with clients, savings and checking accounts, and an interactive menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "savings", "checking", "ledger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
banco = "banco.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["banco"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
