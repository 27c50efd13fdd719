"""
Ginger - Roleplay Practice Engine

This package provides the conversation-practice core of the Ginger
reflection companion: a simulated partner whose emotional stance
reacts to what the user says, a coaching layer that nudges the user
toward healthy communication techniques, end-of-session scoring, and
the emotion decay model used by consciousness tracking.

The engine is presentation-agnostic. It receives plain strings and
enums and returns plain data snapshots.
"""

__version__ = "0.1.0"
__author__ = "Ginger Engineering Team"
