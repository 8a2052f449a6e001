"""Datalog scanning, parsing, relational algebra and rule evaluation."""

__version__ = "0.1.0"