"""Adapters package: user interfaces and command-line entry points."""
