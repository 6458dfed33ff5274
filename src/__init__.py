from .notes import Note, note_at_offset, is_root
from .intervals import interval_between, interval_degree, interval_type
from .scales import Scale, scale_notes, is_in_scale, get_scale
from .qualities import ChordQuality, get_quality, chord_qualities
from .chords import Chord, chord_notes, identify_chord, suggest_chord_quality
from .positions import Position, note_on_fret, get_tuning
from .voicing import Voicing, playable_candidates, generate_voicings
from .pitches import string_octaves, fret_pitch, strum_pitches
from .guitar import Guitar, standard
from .explorer import ChordExplorer, SelectedChord, SavedChord
from .display import Fretboard
from .util import log
