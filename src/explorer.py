### the chord explorer: a session that builds up a chord-in-progress on the fretboard
### from a sequence of touched positions, in the context of a key.

from .notes import Note
from .scales import get_scale, scale_notes
from .qualities import get_quality
from .chords import Chord, chord_notes, identify_chord, suggest_chord_quality
from .positions import Position, cast_position
from .voicing import Voicing
from .pitches import strum_pitches
from .guitar import Guitar
from .util import log
from . import _settings

from dataclasses import dataclass


class SelectedChord:
    """a chord-in-progress: a root and quality anchored at the position it was started from,
    plus the positions currently pinned on the fretboard (at most one per string)
    and the set of strings that have been explicitly muted."""
    def __init__(self, root, quality, root_string, root_fret, pinned=None, muted=None):
        self.root = Note.from_cache(root)
        self.quality = get_quality(quality)
        self.root_string = root_string
        self.root_fret = root_fret
        self.pinned = set() if pinned is None else {cast_position(p) for p in pinned}
        self.muted = set() if muted is None else set(muted)

    @property
    def anchor(self):
        return Position(self.root_string, self.root_fret)

    @property
    def chord(self):
        return Chord(self.root, self.quality)

    @property
    def notes(self):
        return chord_notes(self.root, self.quality)

    @property
    def positions(self):
        """the pinned positions, sorted by string"""
        return sorted(self.pinned)

    def pin(self, pos):
        """pins a position, replacing any other pin on the same string, and unmutes that string"""
        pos = cast_position(pos)
        self.pinned = {p for p in self.pinned if p.string != pos.string}
        self.pinned.add(pos)
        self.muted.discard(pos.string)

    def unpin(self, pos):
        self.pinned.discard(cast_position(pos))

    def copy(self):
        return SelectedChord(self.root, self.quality, self.root_string, self.root_fret,
                             pinned=set(self.pinned), muted=set(self.muted))

    def __eq__(self, other):
        if isinstance(other, SelectedChord):
            return ((self.root, self.quality, self.anchor, self.pinned, self.muted)
                    == (other.root, other.quality, other.anchor, other.pinned, other.muted))
        return NotImplemented

    def __str__(self):
        lb, rb = self._brackets
        pins = ' '.join([f'{p.string}-{p.fret}' for p in self.positions])
        return f'{lb}{self.root.name} {self.quality.short_name}: {pins}{rb}'

    def __repr__(self):
        return f'{str(self)} muted:{sorted(self.muted)}'

    _brackets = _settings.BRACKETS['SelectedChord']


@dataclass(frozen=True, eq=False)
class SavedChord:
    """a labelled snapshot of a chord-in-progress"""
    label: str
    chord: SelectedChord


class ChordExplorer:
    def __init__(self, guitar=None, key_root='C', scale='Major'):
        """an explorer session on a Guitar (or anything that casts to one, like a tuning name),
        in the key given by 'key_root' and 'scale', which decide the quality
        suggested for each new chord."""
        if guitar is None:
            guitar = Guitar()
        elif not isinstance(guitar, Guitar):
            guitar = Guitar(guitar)
        self.guitar = guitar
        self.key_root = Note.from_cache(key_root)
        self.scale = get_scale(scale)

        self.selected = None
        self.saved = []
        self.locked = False

    @property
    def scale_notes(self):
        return scale_notes(self.key_root, self.scale)

    def start_chord(self, string, fret):
        """starts a new chord-in-progress rooted on the note at (string, fret),
        with the quality that the current key suggests for that root"""
        note = self.guitar.note_on_fret(string, fret)
        quality = suggest_chord_quality(note, self.scale_notes)
        self.selected = SelectedChord(note, quality, string, fret, pinned=[Position(string, fret)])
        log(f'Started new chord: {self.selected}')
        return self.selected

    def touch(self, string, fret):
        """handles the user touching a fretboard position, and returns True if the
        touched note has just been sounded (so should be previewed as audio), False otherwise.

        with no chord selected, this starts a new chord on the touched note.
        with a chord selected, touching one of its chord tones (or any open string)
        toggles that position, while touching any other note starts a new chord,
        unless the session is locked, in which case it is ignored.

        the nut (fret 0) cycles each string through three states:
            pinned open string -> muted -> free -> pinned open string ..."""
        if self.selected is None:
            self.start_chord(string, fret)
            return True

        note = self.guitar.note_on_fret(string, fret)
        chord = self.selected
        pos = Position(string, fret)

        if note in chord.notes or pos.is_open:
            if pos.is_open:
                if pos in chord.pinned:
                    chord.unpin(pos)
                    chord.muted.add(string)
                    log(f'Muted string {string}')
                    return False
                elif string in chord.muted:
                    chord.muted.discard(string)
                    log(f'Freed string {string}')
                    return False
                else:
                    chord.pin(pos)
                    log(f'Pinned open string {string}')
                    return True
            else:
                if pos in chord.pinned:
                    chord.unpin(pos)
                    log(f'Unpinned {pos}')
                    return False
                else:
                    chord.pin(pos)
                    log(f'Pinned {pos}')
                    return True
        elif not self.locked:
            self.start_chord(string, fret)
            return True
        else:
            log(f'Ignoring {pos} ({note}): not a tone of locked chord {chord}')
            return False

    def set_quality(self, quality):
        """changes the quality of the chord-in-progress, keeping its pinned positions"""
        if self.selected is not None:
            self.selected.quality = get_quality(quality)

    def next_voicing(self):
        """replaces the pinned positions with the next generated voicing of the selected chord,
        ranked around its anchor fret, and mutes every string that voicing does not use.
        returns the new Voicing, or None if there is no chord or no voicing to move to."""
        if self.selected is None:
            return None
        chord = self.selected
        voicings = self.guitar.voicings(chord.root, chord.quality, preferred_fret=chord.root_fret)
        if len(voicings) == 0:
            log(f'No voicings found for {chord}')
            return None

        current = Voicing(chord.pinned)
        current_idx = voicings.index(current) if current in voicings else -1
        next_idx = (current_idx + 1) % len(voicings)
        next_voicing = voicings[next_idx]

        chord.pinned = set(next_voicing.positions)
        chord.muted = {s for s in range(self.guitar.num_strings) if s not in next_voicing.strings}
        log(f'Moved from voicing #{current_idx} to #{next_idx} of {len(voicings)}: {next_voicing}')
        return next_voicing

    @property
    def label(self):
        """the identified name of the chord-in-progress, or an empty string if there is none"""
        if self.selected is None:
            return ''
        return identify_chord(self.selected.root, self.selected.positions, self.guitar.tuned_strings)

    def save(self):
        """stores a labelled snapshot of the chord-in-progress, and returns it"""
        if self.selected is None:
            return None
        label = self.label or f'{self.selected.root.name} {self.selected.quality.short_name}'
        saved = SavedChord(label, self.selected.copy())
        self.saved.append(saved)
        return saved

    def recall(self, saved):
        """makes a saved chord (or the index of one) the chord-in-progress again"""
        if isinstance(saved, int):
            saved = self.saved[saved]
        self.selected = saved.chord.copy()
        return self.selected

    def delete(self, index):
        return self.saved.pop(index)

    def toggle_lock(self):
        self.locked = not self.locked
        return self.locked

    def clear(self):
        self.selected = None
        self.locked = False

    def strum_pitches(self):
        """the ordered (frequency, string) pairs that strumming the chord-in-progress would sound"""
        if self.selected is None:
            return []
        return strum_pitches(self.guitar.tuned_strings, self.selected.positions, self.selected.muted)

    def show(self):
        """a Fretboard diagram of the chord-in-progress, with its label as title"""
        if self.selected is None:
            return None
        return self.guitar.show_voicing(self.selected.positions, muted=sorted(self.selected.muted),
                                        title=self.label, root=self.selected.root)

    def __str__(self):
        return f'ChordExplorer({self.guitar.name}, key: {self.key_root.name} {self.scale.name}, chord: {self.selected})'

    def __repr__(self):
        return str(self)
