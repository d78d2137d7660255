import json

from raidbot.raids.gyms import Gym, GymDirectory


def _directory():
    return GymDirectory(
        [
            Gym("Town Hall Fountain", 40.7128, -74.006),
            Gym("Riverside Mural", 40.7142, -74.0121),
            Gym("Old Mill Bridge"),
            Gym("Old Mill Bakery"),
        ]
    )


def test_lookup_exact_is_case_insensitive():
    assert _directory().lookup("town hall FOUNTAIN").name == "Town Hall Fountain"


def test_lookup_unique_substring():
    assert _directory().lookup("mural").name == "Riverside Mural"


def test_lookup_fuzzy_match():
    assert _directory().lookup("Riversde Mural").name == "Riverside Mural"


def test_lookup_partial_name_with_shared_prefix():
    assert _directory().lookup("mill bridge").name == "Old Mill Bridge"


def test_lookup_miss_returns_none():
    directory = _directory()

    assert directory.lookup("zzzz") is None
    assert directory.lookup("   ") is None


def test_directions_url_needs_coordinates():
    assert Gym("Old Mill Bridge").directions_url is None
    assert Gym("Fountain", 1.5, -2.25).directions_url == (
        "https://www.google.com/maps/dir/Current+Location/1.5,-2.25"
    )


def test_from_file_reads_both_shapes(tmp_path):
    path = tmp_path / "gyms.json"
    path.write_text(
        json.dumps(
            [
                {"gymName": "Town Hall Fountain", "gymInfo": {"latitude": 1, "longitude": 2}},
                {"name": "Riverside Mural", "latitude": "3.5", "longitude": "4.5"},
                {"name": "No Coordinates"},
                {"latitude": 9, "longitude": 9},
            ]
        ),
        encoding="utf-8",
    )

    directory = GymDirectory.from_file(path)

    assert len(directory) == 3
    assert directory.lookup("town hall fountain") == Gym("Town Hall Fountain", 1.0, 2.0)
    assert directory.lookup("riverside mural") == Gym("Riverside Mural", 3.5, 4.5)
    assert not directory.lookup("no coordinates").has_coordinates


def test_from_missing_file_is_empty(tmp_path):
    directory = GymDirectory.from_file(tmp_path / "missing.json")

    assert len(directory) == 0
    assert directory.lookup("anything") is None
