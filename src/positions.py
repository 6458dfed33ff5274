### fretboard positions, and the mapping from positions to the notes they sound.

from .notes import Note, note_at_offset, cast_notes
from .parsing import parse_out_note_names
from .config.def_tunings import tunings_by_strings, tuning_aliases
from . import _settings

from typing import NamedTuple


class Position(NamedTuple):
    """a place on the fretboard: a string index (0 is the lowest-pitched string)
    and a fret number (0 is the open string)."""
    string: int
    fret: int

    def note(self, tuning):
        """the Note sounded at this position on an instrument with the given tuning"""
        return note_on_fret(tuning[self.string], self.fret)

    @property
    def is_open(self):
        return self.fret == 0

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.string}-{self.fret}{rb}'

    _brackets = _settings.BRACKETS['Position']


def note_on_fret(string_base_note, fret):
    """the Note sounded by fretting a string (tuned to 'string_base_note') at 'fret'"""
    return note_at_offset(string_base_note, fret)

def cast_position(pos):
    """accepts a Position, a (string, fret) pair, or a 'string-fret' key string like '2-5',
    and returns a Position"""
    if isinstance(pos, Position):
        return pos
    elif isinstance(pos, str):
        string, fret = pos.split('-')
        return Position(int(string), int(fret))
    elif isinstance(pos, (tuple, list)) and len(pos) == 2:
        return Position(int(pos[0]), int(pos[1]))
    else:
        raise TypeError(f'Could not interpret {pos} as a fretboard position')

def cast_positions(positions):
    return [cast_position(p) for p in positions]

# every preset tuning by name, in either its alias or table form:
tuning_names = {}
for num_strings, presets in tunings_by_strings.items():
    for name, note_string in presets.items():
        tuning_names[name] = note_string
        tuning_names[(num_strings, name)] = note_string
tuning_names.update(tuning_aliases)

def get_tuning(tuning):
    """accepts one of:
        a preset alias, like 'standard' or 'dropD'
        a preset name from the tuning table, like 'DADGAD' or 'Standard B'
        a (string count, preset name) pair, like (7, 'Drop A')
        a string of note names from low string to high, like 'EADGBE' or 'D A D F# A D'
        or a list of Notes or note names,
    and returns the tuning as a list of Notes"""
    if isinstance(tuning, (str, tuple)) and tuning in tuning_names:
        return cast_notes(tuning_names[tuning])
    elif isinstance(tuning, tuple) and len(tuning) == 2 and isinstance(tuning[0], int):
        raise KeyError(f'No {tuning[0]}-string preset tuning named: {tuning[1]}')
    elif isinstance(tuning, str):
        return cast_notes(parse_out_note_names(tuning))
    elif isinstance(tuning, (list, tuple)):
        return cast_notes(tuning)
    else:
        raise TypeError(f'Could not interpret {type(tuning)} as a tuning')

def sounded_notes(positions, tuning):
    """the Notes sounded at each of 'positions', in the same order"""
    tuning = get_tuning(tuning)
    return [cast_position(p).note(tuning) for p in positions]
