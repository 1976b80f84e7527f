"""Solvers for classic programming-contest problems, with text-input runners and a command."""

__version__ = "0.1.0"