from ..notes import Note, note_at_offset, is_root, cast_notes, chromatic_notes
from ..parsing import valid_note_names
from ..util import log
from .testing_tools import compare

import pytest

def test_notes(verbose=False):
    log.verbose = verbose

    ### magic method tests:
    compare(Note('C') + 2, Note('D'))
    compare(Note('D') - 2, Note('C'))
    compare(Note('D') - Note('C'), 2)
    compare(Note('C') - Note('E'), 8)
    compare(Note('C') + 14, Note('D'))
    compare(Note('C') - 1, Note('B'))

    # enharmonic and unicode spellings all normalise to the canonical sharps:
    compare(Note('Db'), Note('C#'))
    compare(Note('Db').name, 'C#')
    compare(Note('E♭').name, 'D#')
    compare(Note('D♯').name, 'D#')
    compare(Note('Ebb'), Note('C𝄪'))
    compare(Note('E𝄫'), Note('C##'))
    compare(Note('Cbb').name, 'A#')

    # comparison to strings and ints:
    compare(Note('C#') == 'Db', True)
    compare(Note('C') == 'not a note', False)
    compare(Note(13), Note('C#'))
    compare(Note(position=-1).name, 'B')
    compare(hash(Note('Db')), hash(Note('C#')))
    compare(len({Note('Db'), Note('C#'), Note('D')}), 2)

    # abstract notes order from C up to B:
    compare(sorted([Note('B'), Note('E'), Note('C')]), ['C', 'E', 'B'])
    compare(Note('C') < Note('B'), True)

    with pytest.raises(ValueError):
        Note('H')
    with pytest.raises(TypeError):
        Note('C') + 1.5


def test_note_arithmetic(verbose=False):
    log.verbose = verbose

    compare(note_at_offset('C', 4), Note('E'))
    compare(note_at_offset('C', -1), Note('B'))
    compare(note_at_offset('A', 15), Note('C'))
    compare(note_at_offset(Note('G'), 0), Note('G'))

    # every result of note arithmetic is one of the 12 pitch classes:
    for name in valid_note_names:
        for offset in range(-30, 31):
            result = note_at_offset(name, offset)
            assert result in chromatic_notes
            assert 0 <= result.position < 12

    compare(is_root('Db', 'C#'), True)
    compare(is_root('D', 'C#'), False)

    compare(cast_notes('EADGBE'), ['E', 'A', 'D', 'G', 'B', 'E'])
    compare(cast_notes(['Eb', 4, Note('G')]), ['D#', 'E', 'G'])
