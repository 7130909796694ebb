[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "financetracker"
version = "0.1.0"
description = "Personal finance tracker that keeps income and expense transactions in SQLite"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["finance", "budget", "transactions", "income", "expenses", "sqlite"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
financetracker = "financetracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["financetracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
