from src.event_processors.base import ProcessingResult, ProcessingState
from src.event_processors.pull_request.processor import PullRequestProcessor

__all__ = [
    "ProcessingResult",
    "ProcessingState",
    "PullRequestProcessor",
]
