from ..qualities import ChordQuality, get_quality, chord_qualities, Major, Minor, PowerChord, Major7, Minor7, Dominant7, Diminished, Augmented
from ..util import log
from .testing_tools import compare

import pytest

def test_qualities(verbose=False):
    log.verbose = verbose

    compare(len(chord_qualities), 12)
    compare([q.name for q in chord_qualities[:3]], ['Major', 'Minor', 'Power Chord'])

    # lookup by full name, short name and alias:
    compare(get_quality('Minor 7'), Minor7)
    compare(get_quality('m7'), Minor7)
    compare(get_quality('M7'), Major7)
    compare(get_quality('maj7'), Major7)
    compare(get_quality('MAJOR 7'), Major7)
    compare(get_quality('7'), Dominant7)
    compare(get_quality('minor'), Minor)
    compare(get_quality('m'), Minor)
    compare(get_quality(''), Major)
    compare(get_quality('dim'), Diminished)
    compare(get_quality('+'), Augmented)
    compare(get_quality('5'), PowerChord)
    compare(get_quality(Major), Major)
    with pytest.raises(KeyError):
        get_quality('not a chord')
    with pytest.raises(TypeError):
        get_quality(3)

    # qualities are equal by their intervals, not by their names:
    compare(ChordQuality('Triad', 'tri', [0, 4, 7]), Major)
    compare(ChordQuality('Triad', 'tri', [7, 0, 4]), Major)
    compare(Major == Minor, False)

    # membership and subsets:
    compare(4 in Major, True)
    compare(3 in Major, False)
    compare(16 in Major, True)
    compare(Major.is_superset_of([0, 4]), True)
    compare(Major.is_superset_of([0, 3]), False)
    compare(Major7.is_superset_of(Major.intervals), True)
    compare(len(Dominant7), 4)

    # malformed qualities are rejected:
    with pytest.raises(AssertionError):
        ChordQuality('Broken', 'b', [0, 4, 4])
    with pytest.raises(AssertionError):
        ChordQuality('Broken', 'b', [0, 4, 14])
