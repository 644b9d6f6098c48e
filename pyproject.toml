[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miniapps"
version = "0.1.0"
description = "Small console apps: an HTTP load benchmark, a number guessing game, a student record manager and a to-do list"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "http", "load", "cli", "game", "todo", "students"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miniapps-benchmark = "miniapps.benchmark:main"
miniapps-guess = "miniapps.guessing:main"
miniapps-students = "miniapps.students:main"
miniapps-todo = "miniapps.todo:main"

[tool.hatch.build.targets.wheel]
packages = ["miniapps"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
