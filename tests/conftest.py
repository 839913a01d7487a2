"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Add source directory to Python path for imports
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))


@pytest.fixture
def sample_song():
    """Short song with directives, comments, chords and a stanza break"""
    return (
        "{title: Roll In My Sweet Baby's Arms}\n"
        "{artist: Flatt & Scruggs}\n"
        "{key: G}\n"
        "# Verse 1\n"
        "[G]Ain't gonna work on the railroad\n"
        "Ain't gonna work on the [D]farm\n"
        "\n"
        "% ChordPro comment\n"
        "Lay round the shack till the [G]mail train comes back\n"
        "And [D7]roll in my sweet baby's [G]arms\n"
    )


@pytest.fixture
def flat_song():
    """Song written with flat spellings and a slash chord"""
    return (
        "{title: Flat Song}\n"
        "{key: Bb}\n"
        "[Bb]One [Eb/G]two [F7sus4]three [Gm]four\n"
    )


@pytest.fixture
def song_file(tmp_path, sample_song):
    path = tmp_path / "song.pro"
    path.write_text(sample_song, encoding='utf-8')
    return path
