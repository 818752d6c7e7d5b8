"""Ralph loop: run an AI coding agent until its plan is complete."""

__version__ = "0.1.0"
