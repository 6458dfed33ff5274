from ..guitar import Guitar, standard, dadgad, dropD
from ..positions import get_tuning
from ..voicing import Voicing
from ..util import log
from .testing_tools import compare

import pytest

def test_guitar(verbose=False):
    log.verbose = verbose

    # tunings by alias, table name, (strings, name) pair, and note string:
    compare(standard.tuning, 'EADGBE')
    compare(dadgad.tuning, 'DADGAD')
    compare(dropD.tuning, 'DADGBE')
    compare(Guitar('half-step').tuning, 'D#G#C#F#A#D#')
    compare(Guitar('EbAbDbGbBbEb').tuning, 'D#G#C#F#A#D#')
    compare(Guitar((7, 'Standard B')).num_strings, 7)
    compare(Guitar('Standard F#').tuning, 'F#BEADGBE')
    compare(Guitar(['G', 'C', 'E', 'A']).name, 'ukulele')
    compare(get_tuning('D A D F# A D'), ['D', 'A', 'D', 'F#', 'A', 'D'])
    with pytest.raises(KeyError):
        get_tuning((7, 'No Such Tuning'))
    with pytest.raises(ValueError):
        Guitar('XYZ')

    # naming:
    compare(Guitar('EADGBE').name, 'standard')
    compare(Guitar('BEADGBE').name, 'Standard B')
    compare(Guitar('CGDAEG').name, 'CGDAEG')
    compare('E' in standard, True)
    compare('C' in standard, False)

    # fretting:
    compare(standard.note_on_fret(0, 0), 'E')
    compare(standard.note_on_fret(1, 3), 'C')
    compare(standard.note_on_fret(5, 24), 'E')
    with pytest.raises(AssertionError):
        standard.note_on_fret(6, 0)
    with pytest.raises(AssertionError):
        Guitar(max_fret=12).note_on_fret(0, 13)

    compare(standard.fret('x32010'), ['C', 'E', 'G', 'C', 'E'])
    compare(standard['022100'], ['E', 'B', 'E', 'G#', 'B', 'E'])
    compare(standard['x-10-12-12-11-x'], ['G', 'D', 'G', 'A#'])
    compare(standard.positions('x32010'), [(1,3), (2,2), (3,0), (4,1), (5,0)])
    with pytest.raises(ValueError):
        standard.positions('x3201')

    compare(standard.locate_note('C', max_fret=12), [(0,8), (1,3), (2,10), (3,5), (4,1), (5,8)])
    compare(len(standard.locate_note('C')), 12)

    compare(Guitar(max_fret=12).fret_markers, [3, 5, 7, 9, 12])
    compare(standard.fret_markers[-1], 24)


def test_guitar_engine(verbose=False):
    log.verbose = verbose

    compare(standard.identify('C', 'x32010'), 'C Major')
    compare(standard.identify('C', [(1,3), (2,2)]), 'Partial C Major')
    compare(standard.query('x32010'), (['C', 'E', 'G', 'C', 'E'], 'C Major'))
    compare(standard.query('xx0232')[1], 'D Major')
    compare(standard.query('xxxxxx'), ([], 'No notes pinned'))

    compare(standard.voicings('C', 'Major')[0], Voicing([(1,3), (2,2), (5,3)]))
    compare((3,0) in standard.candidates('C', 'Major', 10), True)

    # the neck length bounds the search:
    short = Guitar(max_fret=3)
    compare(all([p.fret <= 3 for p in short.candidates('C', 'Major', 3)]), True)
    for v in short.voicings('C', 'Major'):
        compare(all([p.fret <= 3 for p in v]), True)

    compare([s for f,s in standard.strum_pitches('x32010', muted=[5])], [1, 2, 3, 4])
    compare(standard.octaves, [2, 2, 3, 3, 3, 4])
