"""RedShare: a content-sharing social API for image and video galleries."""

__version__ = "0.1.0"
