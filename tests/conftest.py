"""Shared factories for catalog and playlist tests."""
from tandadj.core.catalog import TrackCatalog
from tandadj.models.track import Track


def make_track(track_id: str, style: str = "tango", artist: str = "Orquesta") -> Track:
    return Track(
        id=track_id,
        title=f"Title {track_id}",
        artist=artist,
        album="Album",
        genre=style,
        year=1940,
        duration=180.0,
        style=style,
        source_path=f"/music/{track_id}.mp3",
        relative_path=f"{track_id}.mp3",
    )


def make_catalog(tango: int = 16, vals: int = 3, milonga: int = 3, cortina: int = 6) -> TrackCatalog:
    tracks = (
        [make_track(f"tango-{i}", "tango") for i in range(tango)]
        + [make_track(f"vals-{i}", "vals") for i in range(vals)]
        + [make_track(f"milonga-{i}", "milonga") for i in range(milonga)]
        + [make_track(f"cortina-{i}", "cortina") for i in range(cortina)]
    )
    return TrackCatalog(tracks)


def make_raw_plan(catalog: TrackCatalog) -> dict:
    """A well-formed agent plan drawing ids from make_catalog()'s naming."""
    return {
        "tandas": [
            {"type": "tango", "reasoning": "Di Sarli opener", "trackIds": ["tango-0", "tango-1", "tango-2", "tango-3"]},
            {"type": "tango", "reasoning": "D'Arienzo drive", "trackIds": ["tango-4", "tango-5", "tango-6", "tango-7"]},
            {"type": "vals", "reasoning": "Canaro valses", "trackIds": ["vals-0", "vals-1", "vals-2"]},
            {"type": "tango", "reasoning": "Troilo", "trackIds": ["tango-8", "tango-9", "tango-10", "tango-11"]},
            {"type": "tango", "reasoning": "Pugliese", "trackIds": ["tango-12", "tango-13", "tango-14", "tango-15"]},
            {"type": "milonga", "reasoning": "Milongas", "trackIds": ["milonga-0", "milonga-1", "milonga-2"]},
        ],
        "cortinaTrackIds": [f"cortina-{i}" for i in range(6)],
    }
