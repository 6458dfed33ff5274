### this module contains the Chord class, the derivation of chord notes from a root,
### and the reverse problem: identifying a chord from the notes that are sounded.

from .notes import Note, note_at_offset
from .qualities import chord_qualities, get_quality, Major, Minor, Diminished
from .intervals import interval_signature, MinorThird, MajorThird, DiminishedFifth, PerfectFifth
from .positions import sounded_notes
from .util import log
from . import parsing, _settings


def chord_notes(root, quality):
    """accepts a root note and a ChordQuality (or a name that looks one up),
    and returns the list of Notes in that chord, in interval order"""
    quality = get_quality(quality)
    return [note_at_offset(root, iv) for iv in quality.intervals]


class Chord:
    """a specific chord: a ChordQuality built on a particular root Note, such as C Major"""
    def __init__(self, root, quality=None):
        """a Chord can be initialised in one of two ways:
            1. by passing a root note (Note, name or position) and a quality
                (ChordQuality, or any name/alias of one, like 'Minor 7' or 'm7')
            2. by passing a single chord name string, like 'Am7' or 'F#dim' or 'Bbsus4',
                which is split into its root and quality."""
        if quality is None:
            if isinstance(root, Chord):
                # accept re-casting:
                root, quality = root.root, root.quality
            elif isinstance(root, str):
                root, quality = parsing.note_split(root)
            else:
                quality = Major

        self.root = Note.from_cache(root)
        self.quality = get_quality(quality)

    @property
    def notes(self):
        return chord_notes(self.root, self.quality)

    @property
    def intervals(self):
        return self.quality.intervals

    @property
    def name(self):
        return f'{self.root.name} {self.quality.name}'

    @property
    def short_name(self):
        return f'{self.root.name} {self.quality.short_name}'

    def __contains__(self, note):
        """a Chord 'contains' a note if it is one of its chord tones"""
        return Note.from_cache(note) in self.notes

    def __eq__(self, other):
        if isinstance(other, str):
            other = Chord(other)
        if isinstance(other, Chord):
            return (self.root == other.root) and (self.quality == other.quality)
        return NotImplemented

    def __hash__(self):
        return hash(('Chord', self.root, self.quality))

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.name}{rb}'

    def __repr__(self):
        return f'{str(self)} [{" ".join([n.name for n in self.notes])}]'

    _brackets = _settings.BRACKETS['Chord']


#### chord identification:

def identify_chord(root, positions, tuning, qualities=None):
    """accepts a root note, a list of fretboard positions (as Positions or (string,fret) pairs),
    and the tuning of the instrument they are played on, and names the chord they sound.

    returns a display string, one of:
        '{root} {quality}'         if the notes form exactly one of the known chord qualities
        'Partial {root} {quality}' if they are an incomplete part of a known quality
                                   (the first one in table order, if several fit)
        '{root} (Custom Voicing)'  if they fit none
    or the 'no notes pinned' message if there are no positions at all.
    'qualities' overrides the table of chord qualities to search, for testing."""
    if len(positions) == 0:
        return _settings.NO_NOTES_MESSAGE
    if qualities is None:
        qualities = chord_qualities

    root = Note.from_cache(root)
    signature = interval_signature(root, sounded_notes(positions, tuning))
    log(f'Identifying chord on {root} with interval signature: {signature}')

    # exact matches first:
    for quality in qualities:
        if set(signature) == quality.interval_set:
            return f'{root.name} {quality.name}'

    # then partial matches, which need at least two distinct intervals to be meaningful:
    if len(signature) > 1:
        for quality in qualities:
            if quality.is_superset_of(signature):
                log(f'No exact match, but {signature} is part of {quality.name}: {list(quality.intervals)}')
                return f'Partial {root.name} {quality.name}'

    return f'{root.name} (Custom Voicing)'


def suggest_chord_quality(root, scale_notes):
    """given a root note and the notes of the current scale, guess the triad
    that the scale builds on that root: Diminished, Minor, or Major (the default).
    if the root is not in the scale at all, also falls back on Major."""
    root = Note.from_cache(root)
    scale_notes = [Note.from_cache(n) for n in scale_notes]
    if root not in scale_notes:
        return Major

    has_interval = lambda iv: (root + iv) in scale_notes

    if has_interval(MinorThird) and has_interval(DiminishedFifth):
        return Diminished
    elif has_interval(MinorThird) and has_interval(PerfectFifth):
        return Minor
    elif has_interval(MajorThird) and has_interval(PerfectFifth):
        return Major
    return Major
