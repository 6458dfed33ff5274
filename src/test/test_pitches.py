from ..pitches import string_octaves, string_octave, midi_value, pitch, fret_pitch, strum_pitches
from ..util import log
from .testing_tools import compare

standard = 'EADGBE'

def test_octaves(verbose=False):
    log.verbose = verbose

    # octaves roll over each time the strings pass a C:
    compare(string_octaves(standard), [2, 2, 3, 3, 3, 4])
    compare(string_octaves('EADG'), [1, 1, 2, 2])
    compare(string_octaves('BEADGBE'), [1, 2, 2, 3, 3, 3, 4])
    compare(string_octaves('DADGAD'), [2, 2, 3, 3, 3, 4])
    # the low B of a five-string bass sits an octave down:
    compare(string_octave('BEADG', 0), 0)
    compare(string_octave('AEADG', 0), 1)


def test_pitches(verbose=False):
    log.verbose = verbose

    compare(midi_value('A', 4), 69)
    compare(midi_value('C', 4), 60)
    compare(pitch(69), 440.0)
    compare(pitch(57), 220.0)

    compare(round(fret_pitch(standard, 0, 0), 2), 82.41) # E2
    compare(fret_pitch(standard, 1, 12), 220.0) # A3
    compare(fret_pitch(standard, 5, 5), 440.0) # A4
    compare(round(fret_pitch(standard, 0, 24), 2), 329.63) # E4
    compare(round(fret_pitch(standard, 4, 1), 2), 261.63) # C4, rolling over from B3


def test_strum(verbose=False):
    log.verbose = verbose

    c_major = [(5,0), (1,3), (3,0), (2,2), (4,1)] # x32010, out of order
    strum = strum_pitches(standard, c_major)
    compare([s for f,s in strum], [1, 2, 3, 4, 5])
    compare([round(f, 2) for f,s in strum], [130.81, 164.81, 196.0, 261.63, 329.63])

    # muted strings are skipped, even if something is pinned on them:
    strum = strum_pitches(standard, [(0,0), (1,2)], muted=[0])
    compare([(round(f, 2), s) for f,s in strum], [(123.47, 1)])

    compare(strum_pitches(standard, []), [])


def test_pitches_above_midi_range(verbose=False):
    log.verbose = verbose

    # nine strings tuned to C climb an octave each, so the top string sits in octave 9:
    nine_cs = ['C'] * 9
    compare(string_octave(nine_cs, 8), 9)
    compare(midi_value('A#', 10), 130)
    compare(round(fret_pitch(nine_cs, 8, 10), 1), 14917.2)
    compare(fret_pitch(nine_cs, 8, 10), 2 * fret_pitch(nine_cs, 7, 10))

    strum = strum_pitches(nine_cs, [(7,0), (8,12)])
    compare([s for f,s in strum], [7, 8])
    compare(round(strum[1][0]), 16744)
