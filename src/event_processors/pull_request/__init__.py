from src.event_processors.pull_request.processor import PullRequestProcessor

__all__ = ["PullRequestProcessor"]
