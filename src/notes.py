### this module contains the Note class and the pitch-class arithmetic built on it.
### Notes are abstract pitch classes in no particular octave, such as the note C.
### all arithmetic on them is modulo 12, and they are always reported using
### the 12 canonical sharp names: C C# D D# E F F# G G# A A# B

from .util import log
from . import parsing, _settings


class Note:
    """a note/chroma/pitch-class defined in the abstract,
    i.e. not associated with a specific note inside an octave,
    such as: C or D#"""
    def __init__(self, name=None, position=None):
        """a Note can be initialised in one of two ways:
            1. by passing to 'name' a valid note name, such as C or D# or Eb.
                flat, double and unicode accidentals are all accepted, but the
                Note is always reported by its canonical sharp name.
            2. by passing to 'position' an integer, denoting a semitone offset from C.
                i.e. position 0 is C, 1 is C#, 2 is D... 11 is B.
                positions outside 0-11 wrap around."""

        if isinstance(name, Note):
            # accept re-casting: just take the input note's position
            name, position = None, name.position
        elif isinstance(name, int):
            # we've been passed a position int instead of a name,
            # which is fine, silently correct:
            name, position = None, name

        self.position = self._parse_input(name, position)
        # 'chroma' is the canonical string denoting pitch class: ('C#', 'E', etc.)
        self.chroma = parsing.chromatic_note_names[self.position]

    #### main input/arg-parsing private method:
    @staticmethod
    def _parse_input(name, position):
        # check that exactly one has been provided:
        assert ((name is not None) + (position is not None) == 1), "Argument to Note init must include exactly one of: name or position"
        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str or int but received {type(name)} to initialise Note object')
            if name not in parsing.note_positions:
                raise ValueError(f'Invalid note name: {name}')
            return parsing.note_positions[name]
        else:
            return position % 12

    @staticmethod
    def from_cache(name=None, position=None):
        """efficient note init from the 12 pre-initialised chromatic notes"""
        if type(name) is Note:
            # no need to fetch from cache: just return the passed object
            return name
        elif type(name) is int:
            # quietly re-parse args:
            name, position = None, name

        if name is not None:
            if name in cached_notes_by_name:
                return cached_notes_by_name[name]
            else:
                return chromatic_notes[Note._parse_input(name, None)]
        elif position is not None:
            return chromatic_notes[position % 12]
        else:
            raise ValueError(f'Note init from cache must include one of "name" or "position"')

    #### magic methods:
    def __add__(self, other):
        """addition with an integer is transposition upward by that many semitones"""
        if isinstance(other, int):
            return Note.from_cache(position = self.position + other)
        else:
            raise TypeError(f'Notes can only be added with integer semitone offsets, not {type(other)}')

    def __sub__(self, other):
        """if 'other' is an integer, returns a new Note that is shifted down by that many semitones.
        if 'other' is another Note (or note name), return the upward interval from other to this note,
        i.e. how many semitones do you have to climb from other to reach this one? (always 0-11)"""
        if isinstance(other, int):
            return Note.from_cache(position = self.position - other)
        elif isinstance(other, (Note, str)):
            other = Note.from_cache(other)
            return (self.position - other.position) % 12
        else:
            raise TypeError(f'Only integers and other Notes can be subtracted from Notes, not {type(other)}')

    ## comparison operators:
    def __eq__(self, other):
        """equality comparison between Notes, returns True if they are the same
        pitch class (so Db == C#). also accepts note name strings and integer positions."""
        if isinstance(other, str):
            if not parsing.is_valid_note_name(other):
                return False
            other = Note.from_cache(other)
        elif isinstance(other, int):
            return self.position == other
        if isinstance(other, Note):
            return self.position == other.position
        elif other is None:
            return False
        else:
            raise TypeError(f'Notes can only be compared to other Notes, but got: {type(other)}')

    def __hash__(self):
        return hash(f'Note:{self.position}')

    def __lt__(self, other):
        """lesser comparison between abstract Notes treats C as the 'lowest' note,
        and B as the 'highest', following octave numbering conventions"""
        if type(other) == Note:
            return self.position < other.position
        else:
            raise TypeError(f'< operation for Notes only defined over other Notes, not {type(other)}')

    @property
    def name(self):
        return f'{self.chroma}'

    def __str__(self):
        return self.name

    def __repr__(self):
        # e.g. '♩C#'
        return f'{self._marker}{self.name}'

    # Note object unicode identifier:
    _marker = _settings.MARKERS['Note']


# the 12 notes of the chromatic scale, pre-initialised in order from C:
chromatic_notes = [Note(position=p) for p in range(12)]
cached_notes_by_name = {name: chromatic_notes[p] for name, p in parsing.note_positions.items()}


#### pitch-class arithmetic:

def note_at_offset(root, offset):
    """returns the Note that lies 'offset' semitones above 'root',
    wrapping around the octave. negative offsets count downward.
    'root' can be a Note, a note name, or an integer position."""
    return Note.from_cache(root) + offset

def is_root(note, root):
    """True if 'note' is the same pitch class as 'root'"""
    return Note.from_cache(note) == Note.from_cache(root)

def cast_notes(notes):
    """accepts an iterable of note-like objects (Notes, names or positions),
    or a string of concatenated note names like 'EADGBE',
    and returns a list of Notes"""
    if isinstance(notes, str):
        notes = parsing.parse_out_note_names(notes)
    note_list = [Note.from_cache(n) for n in notes]
    log(f'Cast {notes} to notes: {note_list}')
    return note_list
