from .notes import Note
from .chords import Chord, identify_chord
from .positions import Position, note_on_fret, cast_positions, get_tuning, tuning_names
from .voicing import Voicing, playable_candidates, generate_voicings
from .pitches import string_octaves, strum_pitches
from .intervals import interval_degree
from .display import Fretboard, voicing_table
from .util import log
from . import parsing, _settings


# preset names keyed by notes, for naming a tuning (aliases come last, so they win over table names):
preset_names = {tuple(parsing.parse_out_note_names(notes)): name for name, notes in tuning_names.items() if isinstance(name, str)}


class Guitar:
    def __init__(self, tuning='standard', max_fret=_settings.MAX_FRET):
        """a fretted instrument with any number of strings, and the engine bound to its tuning.
        tuning can be one of:
        a descriptive string: standard, dropD, openG, etc.
        a string of notes like: EADGBE, DADGAD, B E A D G, etc.
        a (num_strings, name) pair from the preset table, like (7, 'Standard B')"""
        self.tuned_strings = get_tuning(tuning)
        assert max_fret >= 0, f'Guitar must have a non-negative number of frets, but got: {max_fret}'
        self.max_fret = max_fret

        # string describing the tuning, such as EADGBE or DADGAD
        self.tuning = ''.join([s.chroma for s in self.tuned_strings])

    @property
    def num_strings(self):
        return len(self.tuned_strings)

    @property
    def octaves(self):
        """the inferred octave of each open string"""
        return string_octaves(self.tuned_strings)

    @property
    def fret_markers(self):
        """the inlaid marker frets that exist on this neck"""
        return [f for f in _settings.FRET_MARKERS if f <= self.max_fret]

    def note_on_fret(self, string, fret):
        """the Note sounded by 'string' (indexed from 0, the lowest) at 'fret'"""
        assert 0 <= string < self.num_strings, f'String {string} does not exist on a {self.num_strings}-string guitar'
        assert 0 <= fret <= self.max_fret, f'Fret {fret} does not exist on a {self.max_fret}-fret neck'
        return note_on_fret(self.tuned_strings[string], fret)

    def positions(self, frets):
        """parses a tab string like 'x32010' (or 'x-10-12-12-11-x', or a list of ints/None)
        into the list of Positions it frets, skipping strings that are not played"""
        fret_ints = parsing.parse_out_integers(frets, expected_len=self.num_strings)
        if len(fret_ints) != self.num_strings:
            raise ValueError(f'Tab {frets} has {len(fret_ints)} strings, but this guitar has {self.num_strings}')
        return [Position(s, f) for s, f in enumerate(fret_ints) if f is not None]

    def fret(self, frets):
        """simulates plucking each string according to the listed fret diagram,
        and returns the list of resulting Notes from low string to high"""
        return [self.note_on_fret(*p) for p in self.positions(frets)]

    def __getitem__(self, frets):
        return self.fret(frets)

    def __contains__(self, item):
        """a Guitar object 'contains' a note if that note is in its open strings"""
        return Note.from_cache(item) in self.tuned_strings

    def locate_note(self, note, min_fret=0, max_fret=None):
        """accepts a Note (or name),
        and returns a list of Positions where that note appears between min_fret and max_fret"""
        note = Note.from_cache(note)
        if max_fret is None:
            max_fret = self.max_fret
        return [Position(s, f) for s, string in enumerate(self.tuned_strings)
                               for f in range(min_fret, max_fret+1)
                               if note_on_fret(string, f) == note]

    def candidates(self, root, quality, anchor_fret):
        """chord tones of root+quality within reach of anchor_fret, plus open strings"""
        return playable_candidates(self.tuned_strings, root, quality, anchor_fret, max_fret=self.max_fret)

    def voicings(self, root, quality, preferred_fret=0):
        """every generated voicing of root+quality, ranked by closeness to preferred_fret"""
        return generate_voicings(self.tuned_strings, root, quality, preferred_fret=preferred_fret, max_fret=self.max_fret)

    def identify(self, root, positions):
        """names the chord sounded by a list of positions (or a tab string) around a given root"""
        if isinstance(positions, str):
            positions = self.positions(positions)
        return identify_chord(root, cast_positions(positions), self.tuned_strings)

    def strum_pitches(self, positions, muted=None):
        """the ordered (frequency, string) pairs of a strum across these positions"""
        if isinstance(positions, str):
            positions = self.positions(positions)
        return strum_pitches(self.tuned_strings, positions, muted)

    def query(self, frets, root=None):
        """parses the frets passed, and returns the sounded notes alongside the chord name
        identified on 'root' (which defaults to the lowest sounded note)"""
        positions = self.positions(frets)
        sounded = [p.note(self.tuned_strings) for p in positions]
        if root is None:
            root = sounded[0] if len(sounded) > 0 else None
        name = identify_chord(root, positions, self.tuned_strings) if root is not None else _settings.NO_NOTES_MESSAGE
        log(f'Queried {frets}: sounded notes {sounded}, identified as {name}')
        return sounded, name

    #### display methods:

    def _index(self):
        # string labels, from low string to high:
        return [parsing.canonical_display_names[s.chroma] for s in self.tuned_strings]

    def show_voicing(self, voicing, muted=None, title=None, root=None):
        """returns a Fretboard diagram of a Voicing (or list of positions, or tab string),
        with the notes it sounds in each fret and mute markers on unplayed strings.
        if 'root' is given, positions sounding it are highlighted."""
        if isinstance(voicing, str):
            voicing = self.positions(voicing)
        if not isinstance(voicing, Voicing):
            voicing = Voicing(voicing)
        if muted is None:
            muted = [s for s in range(self.num_strings) if s not in voicing.strings]
        cells = {(p.string, p.fret): parsing.canonical_display_names[p.note(self.tuned_strings).chroma] for p in voicing}
        highlight = [(p.string, p.fret) for p in voicing if root is not None and p.note(self.tuned_strings) == root]
        if title is None:
            title = f'Voicing: {voicing.tab(self.num_strings)} on tuning:{self.name}'
        return Fretboard(cells, index=self._index(), mute=muted, open=[], highlight=highlight, title=title)

    def show_chord(self, chord, intervals_only=False, min_fret=0, max_fret=13, title=None):
        """for a given Chord object (or name that casts to Chord),
        returns a Fretboard diagram of where the notes of that chord fall on the neck,
        with the roots highlighted"""
        chord = Chord(chord)
        cells = {}
        for note in chord.notes:
            cell_val = interval_degree(chord.root, note) if intervals_only else parsing.canonical_display_names[note.chroma]
            cells.update({(p.string, p.fret): cell_val for p in self.locate_note(note, min_fret=min_fret, max_fret=max_fret)})
        root_locs = [(p.string, p.fret) for p in self.locate_note(chord.root, min_fret=min_fret, max_fret=max_fret)]
        if title is None:
            title = f'Chord: {chord.name} on tuning:{self.name}'
        return Fretboard(cells, index=self._index(), highlight=root_locs, mute=[], open=[], title=title)

    def show_voicings(self, chord, preferred_fret=0, max_results=None):
        """returns a table of the generated voicings for a Chord (or name that casts to Chord)"""
        chord = Chord(chord)
        voicings = self.voicings(chord.root, chord.quality, preferred_fret=preferred_fret)
        return voicing_table(voicings, self.tuned_strings, preferred_fret=preferred_fret, max_results=max_results)

    @property
    def name(self):
        """uses alias like 'standard' or 'dropD' if defined, otherwise spells out the tuning"""
        key = tuple([s.chroma for s in self.tuned_strings])
        if key in preset_names:
            return preset_names[key]
        else:
            return self.tuning

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}Guitar: {self.tuning} ({self.num_strings} strings, {self.max_fret} frets){rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Guitar']


# some predefined common tunings:
standard = eadgbe = Guitar()
dadgad = Guitar('DADGAD')
dadgbe = dropD = dropd = Guitar('dropD')
bass = Guitar('bass')
ukulele = Guitar('ukulele')
