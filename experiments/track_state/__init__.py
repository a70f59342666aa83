from .runner import TrackStateRunner

__all__ = ['TrackStateRunner']
