"""Solvers for classic online-judge problems, each with a command-line entry point."""

__version__ = "0.1.0"