### this module contains the Scale class and the derivation of scale notes from a root.

from .notes import Note, note_at_offset
from .util import log
from .parsing import parse_out_degrees
from .config.def_scales import scale_defines
from . import _settings

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Scale:
    """a scale defined in the abstract, by its semitone intervals from an implicit tonic,
    such as the Dorian mode: [0, 2, 3, 5, 7, 9, 10].
    two scales are equal if they contain the same intervals, whatever their names."""
    name: str
    intervals: tuple

    def __post_init__(self):
        intervals = tuple([int(i) for i in self.intervals])
        assert len(set([i % 12 for i in intervals])) == len(intervals), f'Scale {self.name} has repeated intervals: {intervals}'
        object.__setattr__(self, 'intervals', intervals)

    @property
    def interval_set(self):
        return frozenset(self.intervals)

    def on_root(self, root):
        """returns the notes of this scale starting on the desired root"""
        return scale_notes(root, self)

    def __len__(self):
        return len(self.intervals)

    def __contains__(self, interval):
        return (interval % 12) in self.interval_set

    def __eq__(self, other):
        if isinstance(other, Scale):
            return self.interval_set == other.interval_set
        return NotImplemented

    def __hash__(self):
        return hash(('Scale', self.interval_set))

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.name}{rb}'

    def __repr__(self):
        return f'{str(self)} {list(self.intervals)}'

    _brackets = _settings.BRACKETS['Scale']


#### scale and chord note derivation:

def scale_notes(root, scale):
    """accepts a root note and a Scale (or a name that looks one up),
    and returns the list of Notes in that scale, in interval order"""
    if not isinstance(scale, Scale):
        scale = get_scale(scale)
    return [note_at_offset(root, iv) for iv in scale.intervals]

def is_in_scale(note, notes):
    """True if 'note' is one of the pitch classes in 'notes'"""
    return Note.from_cache(note) in [Note.from_cache(n) for n in notes]


#### the table of known scales, initialised from config:

scales = []
scale_lookup = {}
for degrees, names in scale_defines.items():
    display_name, aliases = names[0], names[1:]
    scale = Scale(display_name, parse_out_degrees(degrees))
    scales.append(scale)
    for name in [display_name] + aliases:
        scale_lookup[name.lower()] = scale

def get_scale(name):
    """accepts the name or alias of a scale (or a Scale itself),
    and returns the corresponding Scale object from the table"""
    if isinstance(name, Scale):
        return name
    if not isinstance(name, str):
        raise TypeError(f'Expected scale name as str, but got: {type(name)}')
    key = name.strip().lower()
    if key not in scale_lookup:
        raise KeyError(f'Unknown scale: {name}')
    return scale_lookup[key]

Chromatic = get_scale('chromatic')
MajorScale = get_scale('major')
MinorScale = get_scale('minor')

log(f'Initialised {len(scales)} scales')
