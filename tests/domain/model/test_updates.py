from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, TypeAlias

import pytest

from tunesync.domain.model import Album, Artist, Track, UpdateOrigin

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.helpers.outbound import OutboundCall
    from tunesync.domain.model import FieldRef, UpdatableMixin

Pick: TypeAlias = "Callable[[Artist], UpdatableMixin]"

FIELD_CASES: list[tuple[Pick, FieldRef[Any, Any], object]] = [
    (lambda a: a, Artist.NAME, "ABR"),
    (lambda a: a, Artist.YEAR_FOUNDED, 1990),
    (lambda a: a.albums[0], Album.TITLE, "Thrill Seeker (Remaster)"),
    (lambda a: a.albums[1], Album.RELEASE_YEAR, 2008),
    (lambda a: a.albums[0].tracks[2], Track.TITLE, "Endorphins (Live)"),
    (lambda a: a.albums[1].tracks[0], Track.DURATION, timedelta(minutes=4, seconds=13)),
]


@pytest.mark.parametrize(("pick", "ref", "value"), FIELD_CASES)
def test_ui_update_writes_and_notifies_once(
    artist: Artist,
    outbound: list[OutboundCall],
    pick: Pick,
    ref: FieldRef[Any, Any],
    value: object,
) -> None:
    entity = pick(artist)

    entity.update(ref, value, UpdateOrigin.USER_INTERFACE)

    assert ref.get(entity) == value
    assert len(outbound) == 1
    assert outbound[0].entity is entity
    assert outbound[0].ref == ref
    assert outbound[0].value == value


@pytest.mark.parametrize("origin", [UpdateOrigin.NETWORK, UpdateOrigin.INITIALIZATION])
@pytest.mark.parametrize(("pick", "ref", "value"), FIELD_CASES)
def test_network_and_init_updates_are_not_forwarded(
    artist: Artist,
    outbound: list[OutboundCall],
    pick: Pick,
    ref: FieldRef[Any, Any],
    value: object,
    origin: UpdateOrigin,
) -> None:
    entity = pick(artist)

    entity.update(ref, value, origin)

    assert ref.get(entity) == value
    assert outbound == []


def test_update_writes_even_when_value_is_unchanged(
    artist: Artist, outbound: list[OutboundCall]
) -> None:
    seen: list[object] = []
    artist.subscribe(Artist.NAME, seen.append)

    artist.update(Artist.NAME, artist.name, UpdateOrigin.USER_INTERFACE)

    assert seen == ["August Burns Red"]
    assert len(outbound) == 1


def test_outbound_hook_sees_the_new_value(artist: Artist, outbound: list[OutboundCall]) -> None:
    album = artist.albums[0]

    album.update(Album.TITLE, "Renamed", UpdateOrigin.USER_INTERFACE)

    assert outbound[0].observed == "Renamed"


def test_observers_run_before_outbound_notification(
    artist: Artist, outbound: list[OutboundCall]
) -> None:
    events: list[str] = []
    artist.subscribe(Artist.YEAR_FOUNDED, lambda value: events.append(f"observer {value}"))

    artist.update(Artist.YEAR_FOUNDED, 1999, UpdateOrigin.USER_INTERFACE)
    events.append(f"outbound {len(outbound)}")

    assert events == ["observer 1999", "outbound 1"]


def test_network_update_is_still_observed(artist: Artist, outbound: list[OutboundCall]) -> None:
    seen: list[object] = []
    artist.subscribe(Artist.YEAR_FOUNDED, seen.append)

    artist.update(Artist.YEAR_FOUNDED, 2010, UpdateOrigin.NETWORK)

    assert seen == [2010]
    assert outbound == []


def test_sequential_updates_are_forwarded_in_order(
    artist: Artist, outbound: list[OutboundCall]
) -> None:
    track = artist.albums[0].tracks[0]

    track.update(Track.TITLE, "One", UpdateOrigin.USER_INTERFACE)
    track.update(Track.TITLE, "Two", UpdateOrigin.NETWORK)
    track.update(Track.TITLE, "Three", UpdateOrigin.USER_INTERFACE)

    assert [call.value for call in outbound] == ["One", "Three"]
    assert [call.observed for call in outbound] == ["One", "Three"]
    assert track.title == "Three"


def test_update_rejects_reference_of_another_entity_type(artist: Artist) -> None:
    with pytest.raises(TypeError, match=r"Album\.title cannot be applied to Artist"):
        artist.update(Album.TITLE, "Nope", UpdateOrigin.NETWORK)  # pyright: ignore[reportArgumentType]


def test_year_founded_scenario(artist: Artist, outbound: list[OutboundCall]) -> None:
    assert artist.year_founded == 2003

    artist.update(Artist.YEAR_FOUNDED, 1990, UpdateOrigin.USER_INTERFACE)

    assert artist.year_founded == 1990
    assert [(call.ref, call.value) for call in outbound] == [(Artist.YEAR_FOUNDED, 1990)]

    artist.update(Artist.YEAR_FOUNDED, 2010, UpdateOrigin.NETWORK)

    assert artist.year_founded == 2010
    assert len(outbound) == 1


def test_outbound_hook_logs_field_and_value(
    artist: Artist, outbound_log: pytest.LogCaptureFixture
) -> None:
    artist.update(Artist.YEAR_FOUNDED, 1990, UpdateOrigin.USER_INTERFACE)
    artist.update(Artist.YEAR_FOUNDED, 2010, UpdateOrigin.NETWORK)

    assert outbound_log.messages == ["Updating Artist.year_founded to 1990"]


def test_origin_accepts_its_string_value(artist: Artist, outbound: list[OutboundCall]) -> None:
    artist.update(Artist.NAME, "ABR", UpdateOrigin("ui"))

    assert len(outbound) == 1
