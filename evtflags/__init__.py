"""evtflags - parser for the --events filter grammar."""

__version__ = "0.1.0"
