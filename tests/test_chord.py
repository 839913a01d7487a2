"""
Tests for chord token parsing
"""

from chordsheet.chord import ChordToken, parse_token


class TestParseToken:
    """Tests for parse_token()"""

    def test_simple_root(self):
        token = parse_token('G')
        assert token.root == 7
        assert token.suffix == ''
        assert not token.has_bass

    def test_suffix_kept_verbatim(self):
        token = parse_token('F#m7')
        assert token.root == 6
        assert token.suffix == 'm7'

    def test_suffix_is_opaque(self):
        token = parse_token('Cmaj7(#11) ')
        assert token.root == 0
        assert token.suffix == 'maj7(#11) '

    def test_slash_chord(self):
        token = parse_token('G/D')
        assert token.root == 7
        assert token.bass == 2
        assert token.bass_raw == 'D'

    def test_flat_root(self):
        token = parse_token('Bbmaj7')
        assert token.root == 10
        assert token.suffix == 'maj7'

    def test_non_chord_text(self):
        for raw in ['N.C.', 'x2', 'Intro', '', '*', 'g']:
            token = parse_token(raw)
            assert not token.is_chord
            assert str(token) == raw

    def test_unrecognized_bass_is_echoed(self):
        token = parse_token('C/x')
        assert token.is_chord
        assert token.bass is None
        assert token.bass_raw == 'x'
        assert str(token) == 'C/x'

    def test_trailing_slash_kept(self):
        assert str(parse_token('C/')) == 'C/'

    def test_only_first_slash_splits(self):
        token = parse_token('A/B/C')
        assert token.root == 9
        assert token.bass is None
        assert token.bass_raw == 'B/C'
        assert str(token) == 'A/B/C'


class TestAccidentalAmbiguity:
    """The accidental is matched greedily: a 'b' after the root is a flat"""

    def test_flat_root_then_number(self):
        """Bb5 is B-flat power chord, not B with a flat fifth"""
        token = parse_token('Bb5')
        assert token.root == 10
        assert token.suffix == '5'

    def test_cb_root_is_unrecognized(self):
        """Cb5 reads as root Cb, which is not in the tables, so it passes through"""
        token = parse_token('Cb5')
        assert not token.is_chord
        assert str(token.transpose(2)) == 'Cb5'

    def test_e_sharp_root_is_unrecognized(self):
        assert not parse_token('E#m').is_chord


class TestChordTokenTranspose:
    """Tests for ChordToken.transpose()"""

    def test_root_and_bass_move_together(self):
        token = parse_token('Em/G#').transpose(1)
        assert token.root == 5
        assert token.bass == 9
        assert str(token) == 'Fm/A'

    def test_respells_flats(self):
        assert str(parse_token('Db')) == 'C#'
        assert str(parse_token('Ab7').transpose(0)) == 'G#7'

    def test_unparsed_returns_itself(self):
        token = parse_token('N.C.')
        assert token.transpose(3) is token

    def test_unrecognized_bass_survives_transpose(self):
        assert str(parse_token('C/x').transpose(2)) == 'D/x'

    def test_result_is_new_token(self):
        original = parse_token('C')
        moved = original.transpose(4)
        assert original.root == 0
        assert moved.root == 4
        assert isinstance(moved, ChordToken)
