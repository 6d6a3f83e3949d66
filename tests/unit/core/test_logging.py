import re

import structlog

from orgadmin.core.config import Settings
from orgadmin.core.logging import (
    LoggingContext,
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    configure_logging,
    new_correlation_id,
    rename_message_field,
)


def test_new_correlation_id_format():
    assert re.fullmatch(r"cid_[0-9a-f]{12}", new_correlation_id())
    assert new_correlation_id() != new_correlation_id()


def test_add_correlation_id_keeps_bound_value():
    event = add_correlation_id(None, "info", {"correlation_id": "cid_request"})
    assert event["correlation_id"] == "cid_request"

    event = add_correlation_id(None, "info", {})
    assert event["correlation_id"].startswith("cid_")


def test_rename_message_field():
    event = rename_message_field(None, "info", {"event": "Created"})
    assert event == {"message": "Created"}


def test_bind_and_clear_correlation_id():
    bind_correlation_id("cid_abc")
    assert structlog.contextvars.get_contextvars()["correlation_id"] == "cid_abc"

    clear_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_logging_context_unbinds_on_exit():
    with LoggingContext(entity="department", entity_id="dep-1"):
        context = structlog.contextvars.get_contextvars()
        assert context["entity"] == "department"
        assert context["entity_id"] == "dep-1"

    assert "entity" not in structlog.contextvars.get_contextvars()


def test_configure_logging_renderer_follows_settings():
    try:
        configure_logging(Settings(environment="production", log_format="json"))
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

        configure_logging(Settings(environment="development"))
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()
