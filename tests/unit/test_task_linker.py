"""Tests for TaskLinker."""

import logging

import requests

from delino_actions.core.task_linker import TaskLinker
from delino_actions.integrations.delino.client import DelinoClient

from runner_fixtures import make_response


def _linker(settings, session, service="devbird"):
    factory = DelinoClient.for_devbird if service == "devbird" else DelinoClient.for_autodev
    return TaskLinker(factory(settings, access_token="dat-123", session=session))


def test_skips_without_workflow_token(settings, session):
    assert _linker(settings, session).link("", "4242") is None
    session.post.assert_not_called()


def test_posts_bearer_authenticated_link_request(settings, session):
    session.post.return_value = make_response(200, {"success": True, "message": "linked"})

    report = _linker(settings, session).link("wet-token", "4242")

    assert report.success is True
    url = session.post.call_args.args[0]
    kwargs = session.post.call_args.kwargs
    assert url == "https://devbird.test/delino.devbird.v1.DevBird/LinkGitHubActionByToken"
    assert kwargs["json"] == {"workflow_execution_token": "wet-token", "github_run_id": "4242"}
    assert kwargs["headers"]["Authorization"] == "Bearer dat-123"
    assert kwargs["headers"]["Content-Type"] == "application/json"


def test_autodev_service_path(settings, session):
    session.post.return_value = make_response(200, {"success": True, "message": "linked"})

    _linker(settings, session, service="autodev").link("wet-token", "4242")

    assert session.post.call_args.args[0] == (
        "https://autodev.test/delino.autodev.v1.AutoDev/LinkGitHubActionByToken"
    )


def test_token_sent_verbatim(settings, session):
    session.post.return_value = make_response(200, {"success": True, "message": "linked"})
    token = "  wet/with+odd=chars  "

    _linker(settings, session).link(token, "1")

    assert session.post.call_args.kwargs["json"]["workflow_execution_token"] == token


def test_non_200_is_warning_not_error(settings, session, caplog):
    session.post.return_value = make_response(404, text="task not found")

    with caplog.at_level(logging.WARNING):
        report = _linker(settings, session).link("wet-token", "4242")

    assert report.success is False
    assert all(r.levelno == logging.WARNING for r in caplog.records)
    assert "GitHub Action link failed: HTTP 404: task not found" in caplog.text


def test_network_error_is_warning(settings, session):
    session.post.side_effect = requests.ConnectionError("dns failure")

    report = _linker(settings, session).link("wet-token", "4242")

    assert report.success is False
    assert "dns failure" in report.message
