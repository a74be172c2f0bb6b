"""
mgmtshell: management shell command core.

Carries command results across the execution/presentation boundary as
CommandResponse envelopes, and launches the VSD statistics viewer over a
validated set of .gfs archive files.
"""

__version__ = "0.1.0"
