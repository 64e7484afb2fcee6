"""Pose hierarchical cartoon actors on a picture and edit them interactively."""

__version__ = "0.1.0"