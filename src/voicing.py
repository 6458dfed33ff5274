### the geometric voicing engine: finds playable chord shapes on an arbitrary tuning
### by reasoning about hand reach on the fretboard, instead of looking them up in a static database.

from .notes import Note
from .chords import chord_notes
from .positions import Position, cast_position, get_tuning, note_on_fret
from .util import log
from . import _settings

import numpy as np


class Voicing:
    """a playable chord shape: an unordered set of fretboard positions,
    with at most one sounded position on each string.
    strings that do not appear in the voicing are not played."""
    def __init__(self, positions):
        positions = [cast_position(p) for p in positions]
        strings = [p.string for p in positions]
        assert len(set(strings)) == len(strings), f'A voicing can only sound one fret per string, but got: {positions}'
        self.positions = frozenset(positions)

    @property
    def key(self):
        """the canonical sorted form of this voicing's positions,
        which is the same for any voicing of the same positions"""
        return tuple(sorted(self.positions))

    @property
    def frets(self):
        return [p.fret for p in self.key]

    @property
    def strings(self):
        return [p.string for p in self.key]

    @property
    def mean_fret(self):
        if len(self.positions) == 0:
            return 0.0
        return float(np.mean(self.frets))

    def distance_from(self, fret):
        """how far this voicing's average hand position lies from a desired fret"""
        return abs(self.mean_fret - fret)

    def notes(self, tuning):
        """the Notes this voicing sounds on the given tuning, from low string to high"""
        tuning = get_tuning(tuning)
        return [p.note(tuning) for p in self.key]

    def fret_on(self, string):
        """the fret played on this string, or None if it is not played"""
        for p in self.positions:
            if p.string == string:
                return p.fret
        return None

    def tab(self, num_strings):
        """renders this voicing as a tab string from low string to high,
        like 'x32010', using separators if any fret has two digits, like 'x-10-12-12-11-x'"""
        frets = [self.fret_on(s) for s in range(num_strings)]
        chars = ['x' if f is None else str(f) for f in frets]
        if all([len(c) == 1 for c in chars]):
            return ''.join(chars)
        return '-'.join(chars)

    def __contains__(self, pos):
        return cast_position(pos) in self.positions

    def __iter__(self):
        return iter(self.key)

    def __len__(self):
        return len(self.positions)

    def __eq__(self, other):
        if isinstance(other, Voicing):
            return self.positions == other.positions
        elif isinstance(other, (list, tuple, set, frozenset)):
            return self.positions == frozenset([cast_position(p) for p in other])
        return NotImplemented

    def __hash__(self):
        return hash(('Voicing', self.positions))

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{" ".join([f"{p.string}-{p.fret}" for p in self.key])}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Voicing']


#### candidate search:

def playable_candidates(tuning, root, quality, anchor_fret, max_fret=_settings.MAX_FRET):
    """returns the set of fretboard Positions that sound a tone of the chord (root + quality)
    within comfortable reach of 'anchor_fret', i.e. within CANDIDATE_REACH frets either side of it.
    open strings need no hand position at all, so they are always included if they are chord tones."""
    tuning = get_tuning(tuning)
    tones = chord_notes(root, quality)
    min_fret = max(0, anchor_fret - _settings.CANDIDATE_REACH)
    top_fret = min(max_fret, anchor_fret + _settings.CANDIDATE_REACH)

    candidates = set()
    for s, string_note in enumerate(tuning):
        for fret in range(0, max_fret+1):
            if note_on_fret(string_note, fret) in tones:
                if (min_fret <= fret <= top_fret) or fret == 0:
                    candidates.add(Position(s, fret))
    log(f'Found {len(candidates)} candidate positions around fret {anchor_fret} (window {min_fret}-{top_fret})')
    return candidates


#### voicing generation:

def root_anchors(tuning, root, max_fret=_settings.MAX_FRET):
    """every position within the first octave of the neck that sounds the root note,
    in order of string and then fret"""
    tuning = get_tuning(tuning)
    root = Note.from_cache(root)
    last_fret = min(_settings.ROOT_SEARCH_FRETS, max_fret)
    return [Position(s, fret) for s, string_note in enumerate(tuning)
                              for fret in range(0, last_fret+1)
                              if note_on_fret(string_note, fret) == root]

def build_voicing(tuning, anchor, tones, max_fret=_settings.MAX_FRET):
    """grows a chord shape outward from a root 'anchor' position.

    walks the strings above the anchor's string in ascending order, and on each one
    picks the unused chord tone whose fret is closest to the anchor's fret,
    within VOICING_REACH_BELOW frets below it and VOICING_REACH_ABOVE frets above it.
    on equal distance, the lower fret wins.
    stops as soon as every chord tone has been used.

    returns the list of chosen positions and the set of Notes they use."""
    distinct_tones = set(tones)
    positions = [anchor]
    used = {anchor.note(tuning)}

    low = max(0, anchor.fret - _settings.VOICING_REACH_BELOW)
    high = min(max_fret, anchor.fret + _settings.VOICING_REACH_ABOVE)

    for s in range(anchor.string + 1, len(tuning)):
        if len(used) == len(distinct_tones):
            break

        best_fret, min_distance = None, None
        for fret in range(low, high+1):
            note = note_on_fret(tuning[s], fret)
            if note in distinct_tones and note not in used:
                distance = abs(fret - anchor.fret)
                if min_distance is None or distance < min_distance:
                    best_fret, min_distance = fret, distance

        if best_fret is not None:
            best = Position(s, best_fret)
            positions.append(best)
            used.add(best.note(tuning))
    return positions, used

def generate_voicings(tuning, root, quality, preferred_fret=0, max_fret=_settings.MAX_FRET):
    """generates every playable voicing of a chord (root + quality) on the given tuning,
    ranked by how close each one's average fret lies to 'preferred_fret'.

    a voicing is grown from each placement of the root in the first octave of the neck,
    and is kept only if it contains enough distinct chord tones to be recognisable:
    at least MIN_VOICING_TONES, or every tone for chords with fewer than that.
    duplicate shapes reached from different root placements are only listed once.

    returns a (possibly empty) list of Voicing objects."""
    tuning = get_tuning(tuning)
    tones = chord_notes(root, quality)
    num_tones = len(set(tones))
    min_tones = min(_settings.MIN_VOICING_TONES, num_tones)

    accepted = []
    for anchor in root_anchors(tuning, root, max_fret=max_fret):
        positions, used = build_voicing(tuning, anchor, tones, max_fret=max_fret)
        if len(used) >= min_tones:
            accepted.append(Voicing(positions))
        else:
            log(f'Rejecting voicing from anchor {anchor}: only {len(used)} of {num_tones} chord tones reachable')

    # deduplicate, keeping the first occurrence of each shape:
    unique_voicings = list(dict.fromkeys(accepted))

    # rank by proximity to preferred fret (stable, so ties keep their discovery order):
    distances = np.array([v.distance_from(preferred_fret) for v in unique_voicings], dtype=float)
    ranking = np.argsort(distances, kind='stable')
    ranked = [unique_voicings[i] for i in ranking]
    log(f'Generated {len(ranked)} voicings ({len(accepted)} before deduplication) around fret {preferred_fret}')
    return ranked
