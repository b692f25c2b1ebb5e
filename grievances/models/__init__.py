from .official import Official
from .submission import Submission

__all__ = ["Official", "Submission"]
