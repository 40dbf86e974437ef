"""Rules of a campus platformer: festival stages, museum quiz rooms, leaves, save points and music."""

__version__ = "0.7.0"