"""
Tests for the pitch-class model
"""

import pytest
from chordsheet.pitch import FLATS, SHARPS, normalize, note_name, shift


class TestNormalize:
    """Tests for normalize()"""

    def test_naturals(self):
        assert normalize('C') == 0
        assert normalize('E') == 4
        assert normalize('B') == 11

    def test_sharps(self):
        assert normalize('C#') == 1
        assert normalize('F#') == 6
        assert normalize('A#') == 10

    def test_flats_fold_to_sharp_index(self):
        assert normalize('Db') == normalize('C#')
        assert normalize('Bb') == 10
        assert normalize('Gb') == 6

    def test_every_table_entry(self):
        for index, (sharp, flat) in enumerate(zip(SHARPS, FLATS)):
            assert normalize(sharp) == index
            assert normalize(flat) == index

    @pytest.mark.parametrize('note', ['C##', 'Dbb', 'Cb', 'E#', 'Fb', 'B#', 'c', 'H', '', ' C'])
    def test_unrecognized(self, note):
        """Double accidentals and spellings outside the tables are not notes"""
        assert normalize(note) is None


class TestShift:
    """Tests for shift() and note_name()"""

    def test_wraps_up(self):
        assert shift(11, 1) == 0
        assert shift(7, 7) == 2

    def test_wraps_down(self):
        assert shift(0, -1) == 11
        assert shift(0, -13) == 11

    def test_octaves_are_identity(self):
        for pitch_class in range(12):
            assert shift(pitch_class, 12) == pitch_class
            assert shift(pitch_class, -24) == pitch_class

    def test_note_name_uses_sharps(self):
        assert note_name(1) == 'C#'
        assert note_name(10) == 'A#'
        assert note_name(13) == 'C#'
        assert note_name(-1) == 'B'
