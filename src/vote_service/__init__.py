"""Voting backend: topic votings, sessions, yes/no votes and tallies."""

__version__ = "0.1.0"
