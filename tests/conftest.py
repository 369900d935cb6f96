from __future__ import annotations

import logging

import pytest

from tests.helpers.outbound import OutboundCall, record_outbound
from tunesync.demo import build_demo_artist
from tunesync.domain.model import Artist

MUSIC_LOGGER = "tunesync.domain.model.music"


@pytest.fixture
def artist() -> Artist:
    return build_demo_artist()


@pytest.fixture
def outbound(monkeypatch: pytest.MonkeyPatch) -> list[OutboundCall]:
    return record_outbound(monkeypatch)


@pytest.fixture
def outbound_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger=MUSIC_LOGGER)
    return caplog
