from .runner import TargetActionRunner

__all__ = ['TargetActionRunner']
