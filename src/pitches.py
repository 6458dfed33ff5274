### concrete pitches for fretted positions: octave inference for each string of a tuning,
### equal-temperament frequencies, and the ordered pitch list of a strummed chord.
### no sound is synthesised here; these are the values a playback backend needs.

from .notes import Note
from .positions import cast_position, get_tuning
from .util import log
from . import _settings

import numpy as np

# 12-TET pitches for every MIDI note value, from A4 by formula:
midi_range = np.arange(128)
equal_midi_pitches = _settings.A4_PITCH * 2.0 ** ((midi_range - 69) / 12)


def base_octave(num_strings, tuning, string):
    """the octave that the lowest string sits in, by instrument type:
    basses (5 strings or fewer) sit in octave 1, except for the low B of a 5-string bass,
    standard guitars in octave 2, and extended range guitars in octave 1"""
    if num_strings <= 5:
        if string == 0 and num_strings == 5 and tuning[0] == 'B':
            return 0
        return 1
    elif num_strings == 6:
        return 2
    else:
        return 1

def string_octave(tuning, string):
    """infers the octave of the open 'string' in this tuning, by starting from the
    instrument's base octave and rolling over each time the strings' pitch classes
    fail to ascend, i.e. every time we pass a C going up the strings"""
    tuning = get_tuning(tuning)
    assert 0 <= string < len(tuning), f'String {string} does not exist on a {len(tuning)}-string tuning'
    octave = base_octave(len(tuning), tuning, string)
    for s in range(1, string+1):
        if tuning[s].position <= tuning[s-1].position:
            octave += 1
    return octave

def string_octaves(tuning):
    """the octave of each open string in this tuning, from low string to high"""
    tuning = get_tuning(tuning)
    return [string_octave(tuning, s) for s in range(len(tuning))]

def midi_value(note, octave):
    """MIDI note number of a pitch class in an octave, where C4 is 60 and A4 is 69"""
    return (octave + 1) * 12 + Note.from_cache(note).position

def pitch(midi):
    """equal-temperament frequency in Hz of a MIDI note number.
    notes above the MIDI range (e.g. high frets on many-stringed tunings) are computed directly"""
    if 0 <= midi < len(equal_midi_pitches):
        return float(equal_midi_pitches[midi])
    return float(_settings.A4_PITCH * 2.0 ** ((midi - 69) / 12))

def fret_pitch(tuning, string, fret):
    """frequency in Hz of the note sounded on 'string' at 'fret' in this tuning,
    rolling over into higher octaves as the fret passes each octave of the open string"""
    tuning = get_tuning(tuning)
    open_note = tuning[string]
    semitones = open_note.position + fret
    octave = string_octave(tuning, string) + (semitones // 12)
    return pitch(midi_value(semitones % 12, octave))

def strum_pitches(tuning, positions, muted=None):
    """the audio interface for a strummed chord: accepts the pinned positions and a
    collection of muted string indices, and returns the ordered list of
    (frequency, string) pairs to be sounded, from low string to high.
    strings that are muted or have nothing pinned are skipped.
    a playback backend should stagger them by _settings.STRUM_DELAY seconds."""
    tuning = get_tuning(tuning)
    muted = set() if muted is None else set(muted)
    positions = sorted([cast_position(p) for p in positions])
    strummed = [(fret_pitch(tuning, p.string, p.fret), p.string) for p in positions if p.string not in muted]
    log(f'Strumming {len(strummed)} of {len(positions)} pinned strings ({len(muted)} muted)')
    return strummed
