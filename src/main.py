import logging

from fastapi import FastAPI

from src.core.config import config
from src.core.models import EventType
from src.core.utils.logging import setup_logging
from src.event_processors.pull_request.processor import PullRequestProcessor
from src.integrations.github.api import GitHubClient
from src.webhooks.dispatcher import dispatcher
from src.webhooks.handlers.pull_request import PullRequestEventHandler
from src.webhooks.router import router as webhook_router

# --- Application Setup ---

setup_logging(config.logging)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="L10n Review Bot",
    description="Routes localization pull requests to their translator teams.",
    version="0.1.0",
)

github_client = GitHubClient(config.github)

# --- Include Routers ---

app.include_router(webhook_router, prefix="/webhooks", tags=["GitHub Webhooks"])

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {
        "status": "ok",
        "repository": config.github.repo_full_name,
        "mode": config.localization.mode.value,
    }


# --- Application Lifecycle ---


@app.on_event("startup")
async def startup_event():
    """Application startup logic."""
    config.validate()

    processor = PullRequestProcessor(github_client, config.github, config.localization)
    dispatcher.register_handler(
        EventType.PULL_REQUEST,
        PullRequestEventHandler(processor, repo_full_name=config.github.repo_full_name),
    )

    logger.info(
        f"Watching {config.github.repo_full_name} for localization changes "
        f"(mode={config.localization.mode.value}, governance team={config.localization.governance_team})"
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown logic."""
    await github_client.close()
    logger.info("GitHub client closed.")
