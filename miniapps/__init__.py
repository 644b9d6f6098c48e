"""Small console apps: an HTTP load benchmark, a number guessing game, a student record manager and a to-do list."""

__version__ = "0.1.0"

__all__ = ["benchmark", "guessing", "students", "todo"]