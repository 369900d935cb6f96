"""Built-in demo artist used when no seed file is configured."""

from __future__ import annotations

from datetime import timedelta

from tunesync.domain.model import Album, Artist, Track


def _track(title: str, minutes: int, seconds: int) -> Track:
    return Track(title=title, duration=timedelta(minutes=minutes, seconds=seconds))


def build_demo_artist() -> Artist:
    return Artist(
        name="August Burns Red",
        year_founded=2003,
        albums=[
            Album(
                title="Thrill Seeker",
                release_year=2005,
                tracks=[
                    _track("Your Little Suburbia is in Ruins", 3, 59),
                    _track("Speech Impediment", 4, 1),
                    _track("Endorphins", 3, 10),
                ],
            ),
            Album(
                title="Messengers",
                release_year=2007,
                tracks=[
                    _track("Truth of a Liar", 4, 12),
                    _track("Up Against the Ropes", 5, 4),
                    _track("Back Burner", 3, 43),
                ],
            ),
        ],
    )
