"""stk - terminal CLI for runstreak."""

__version__ = "0.1.0"
