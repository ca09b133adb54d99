from src.core.models import EventType, PullRequest, TeamMetadata, WebhookEvent


def test_pull_request_author_login():
    pr = PullRequest.model_validate({"number": 1, "user": {"login": "bob", "id": 2}, "state": "open"})

    assert pr.author_login == "bob"


def test_pull_request_without_user_has_no_author():
    assert PullRequest(number=1).author_login is None


def test_team_metadata_parent_is_optional():
    assert TeamMetadata(slug="fr_FR").parent_slug is None


def test_webhook_event_accessors():
    event = WebhookEvent(
        EventType.PULL_REQUEST,
        {"repository": {"full_name": "org/app"}, "sender": {"login": "octocat"}},
        delivery_id="d-1",
    )

    assert event.repo_full_name == "org/app"
    assert event.sender_login == "octocat"
    assert event.delivery_id == "d-1"


def test_webhook_event_with_null_sections():
    event = WebhookEvent(EventType.PING, {"repository": None, "sender": None})

    assert event.repo_full_name == ""
    assert event.sender_login == ""
