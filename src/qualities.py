# OOP representation of chord qualities: the interval skeleton of a chord, independent of its root
from .util import log, unpack_and_reverse_dict
from .parsing import parse_out_degrees
from .config.def_chords import chord_defines, chord_aliases
from . import _settings

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class ChordQuality:
    """class representing a type of chord, such as Major or Minor 7,
    defined by its semitone intervals from an implicit root.
    two qualities are equal if they contain the same intervals, whatever their names."""
    name: str
    short_name: str
    intervals: tuple

    def __post_init__(self):
        intervals = tuple([int(i) for i in self.intervals])
        assert len(set(intervals)) == len(intervals), f'ChordQuality {self.name} has repeated intervals: {intervals}'
        assert all([0 <= i <= 11 for i in intervals]), f'ChordQuality {self.name} has intervals outside the octave: {intervals}'
        # frozen dataclass, so set the cleaned attribute through object:
        object.__setattr__(self, 'intervals', intervals)

    @property
    def interval_set(self):
        return frozenset(self.intervals)

    def __len__(self):
        return len(self.intervals)

    def __contains__(self, interval):
        """a ChordQuality 'contains' a semitone interval if it is one of its chord tones"""
        return (interval % 12) in self.interval_set

    def __eq__(self, other):
        if isinstance(other, ChordQuality):
            return self.interval_set == other.interval_set
        return NotImplemented

    def __hash__(self):
        return hash(('ChordQuality', self.interval_set))

    def is_superset_of(self, intervals):
        """True if every interval in 'intervals' is one of this quality's chord tones"""
        return set(intervals).issubset(self.interval_set)

    def on_root(self, root):
        """returns the Chord of this quality built on the desired root note"""
        from .chords import Chord # lazy import
        return Chord(root, self)

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.name}{rb}'

    def __repr__(self):
        return f'{str(self)} {list(self.intervals)}'

    _brackets = _settings.BRACKETS['ChordQuality']


#### the table of known chord qualities, initialised from config:

# in table order, which determines the order of chord identification:
chord_qualities = [ChordQuality(name, short_name, parse_out_degrees(degrees))
                   for name, (short_name, degrees) in chord_defines.items()]
qualities_by_name = {q.name: q for q in chord_qualities}

# every name a quality can be looked up by: full name, short name, and aliases
quality_lookup = {}
for q in chord_qualities:
    quality_lookup[q.name] = q
    quality_lookup[q.short_name] = q
quality_lookup.update({alias: qualities_by_name[name] for alias, name in unpack_and_reverse_dict(chord_aliases).items()})
# case-insensitive lookups for the names where case is not meaningful:
# ('M' and 'm' must stay distinct)
lower_quality_lookup = {}
for name, q in quality_lookup.items():
    if len(name) > 1:
        # earlier (canonical) names win over later aliases that collide when lowered, like m7/M7
        lower_quality_lookup.setdefault(name.lower(), q)

def get_quality(name):
    """accepts the name, short name or alias of a chord quality (or a ChordQuality itself),
    and returns the corresponding ChordQuality object from the table"""
    if isinstance(name, ChordQuality):
        return name
    if not isinstance(name, str):
        raise TypeError(f'Expected chord quality name as str, but got: {type(name)}')
    if name in quality_lookup:
        return quality_lookup[name]
    elif name.strip().lower() in lower_quality_lookup:
        return lower_quality_lookup[name.strip().lower()]
    else:
        raise KeyError(f'Unknown chord quality: {name}')

# common qualities as module-level objects:
Major = qualities_by_name['Major']
Minor = qualities_by_name['Minor']
PowerChord = qualities_by_name['Power Chord']
Major7 = qualities_by_name['Major 7']
Minor7 = qualities_by_name['Minor 7']
Dominant7 = qualities_by_name['Dominant 7']
Diminished = qualities_by_name['Diminished']
Augmented = qualities_by_name['Augmented']

log(f'Initialised {len(chord_qualities)} chord qualities')
