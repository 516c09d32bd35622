"""genchat - a console chat client for hosted generative models."""

from .params import GenerationConfig
from .session import ChatSession, SessionContext, SessionState

__version__ = "0.1.0"

__all__ = ["ChatSession", "GenerationConfig", "SessionContext", "SessionState"]
