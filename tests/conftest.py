"""Pytest configuration and fixtures for relay tests"""
import httpx
import pytest

from ngl_relay.config import RelaySettings
from ngl_relay.messages import MessageCatalog
from ngl_relay.relay import RelayHandler
from ngl_relay.upstream import NGLClient


@pytest.fixture
def settings():
    """Settings pointing at the real NGL host; transports are always mocked"""
    return RelaySettings(
        base_url="https://ngl.link",
        submit_path="/api/submit",
        timeout=5.0,
        locale="id",
        messages_file=None,
    )


@pytest.fixture
def make_handler(settings):
    """Build a RelayHandler whose NGL traffic goes to ``respond``"""
    def _make(respond, locale="id"):
        client = NGLClient(settings, transport=httpx.MockTransport(respond))
        return RelayHandler(settings, client=client, catalog=MessageCatalog(locale=locale))
    return _make
