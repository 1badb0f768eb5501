"""Discrete-event simulation of message-passing peers in 3D space."""

__version__ = "0.1.0"