from ..scales import Scale, scale_notes, is_in_scale, get_scale, scales, Chromatic, MajorScale, MinorScale
from ..notes import chromatic_notes
from ..util import log
from .testing_tools import compare

import pytest

def test_scales(verbose=False):
    log.verbose = verbose

    compare(scale_notes('C', 'major'), ['C', 'D', 'E', 'F', 'G', 'A', 'B'])
    compare(scale_notes('A', 'minor'), ['A', 'B', 'C', 'D', 'E', 'F', 'G'])
    compare(scale_notes('D', 'dorian'), ['D', 'E', 'F', 'G', 'A', 'B', 'C'])
    compare(scale_notes('A', 'Minor Pentatonic'), ['A', 'C', 'D', 'E', 'G'])
    compare(MajorScale.on_root('G'), ['G', 'A', 'B', 'C', 'D', 'E', 'F#'])

    # scale lookup by name and alias:
    compare(get_scale('Aeolian'), MinorScale)
    compare(get_scale('natural major'), MajorScale)
    compare(get_scale(MajorScale), MajorScale)
    with pytest.raises(KeyError):
        get_scale('not a scale')
    with pytest.raises(TypeError):
        get_scale(7)

    # scales are equal by their intervals, not by their names:
    compare(Scale('Ionian but renamed', [0, 2, 4, 5, 7, 9, 11]), MajorScale)
    compare(hash(Scale('Ionian but renamed', [0, 2, 4, 5, 7, 9, 11])), hash(MajorScale))
    compare(MajorScale == MinorScale, False)

    # the built-in table:
    compare(len(scales), 12)
    compare(scales[0], Chromatic)
    compare(len(Chromatic), 12)

    # scale notes always have as many notes as the scale has intervals:
    for scale in scales:
        for root in chromatic_notes:
            compare(len(scale_notes(root, scale)), len(scale), compare='equal')

    compare(is_in_scale('Db', scale_notes('C', 'chromatic')), True)
    compare(is_in_scale('F#', scale_notes('C', 'major')), False)
    compare(is_in_scale('Gb', scale_notes('G', 'major')), True)
