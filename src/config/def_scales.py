### common scales are defined here, keyed by their degrees relative to the tonic,
### with a list of names: the first is the display name, and the rest are aliases.
### order matters only for display: scales are listed to the user in this order.

scale_defines = {
    '1, b2, 2, b3, 3, 4, b5, 5, b6, 6, b7, 7': ['Chromatic'],

    #### heptatonic scales:
    '1,  2,  3,  4,  5,  6,  7': ['Major (Ionian)', 'major', 'natural major', 'ionian'],
    '1,  2, b3,  4,  5, b6, b7': ['Natural Minor (Aeolian)', 'minor', 'natural minor', 'aeolian'],
    '1,  2, b3,  4,  5, b6,  7': ['Harmonic Minor'],

    #### pentatonic and hexatonic scales:
    '1,  2,  3,  5,  6':         ['Major Pentatonic', 'pentatonic'],
    '1, b3,  4,  5, b7':         ['Minor Pentatonic'],
    '1, b3,  4, b5,  5, b7':     ['Blues', 'minor blues'],

    #### the other modes of the major scale:
    '1,  2, b3,  4,  5,  6, b7': ['Dorian'],
    '1, b2, b3,  4,  5, b6, b7': ['Phrygian'],
    '1,  2,  3, #4,  5,  6,  7': ['Lydian'],
    '1,  2,  3,  4,  5,  6, b7': ['Mixolydian'],
    '1, b2, b3,  4, b5, b6, b7': ['Locrian'],
    }
