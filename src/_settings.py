############# preference settings:

### VERBOSE controls whether the util.log object prints its detailed trace
### of nested function execution. it can also be toggled at runtime through
### the 'verbose' attribute of the log object itself.
VERBOSE = False

### PREFER_UNICODE_ACCIDENTALS controls whether sharps are printed in text
### diagrams as the keyboard-typable character '#' (if False)
### or the unicode character '♯' (if True).
### both are treated as valid input options in either case, and the canonical
### note names returned by the engine (e.g. 'C#') always use '#'.
PREFER_UNICODE_ACCIDENTALS = False


############# fretboard settings:

### MAX_FRET is the highest fret on the neck. fret 0 is the open string (nut),
### so a 24-fret neck has 25 positions per string.
MAX_FRET = 24

### fret positions that carry inlay markers on a typical neck:
FRET_MARKERS = (3, 5, 7, 9, 12, 15, 17, 19, 21, 24)


############# voicing settings:

### ROOT_SEARCH_FRETS is the highest fret at which the voicing generator will
### place a chord's root.
ROOT_SEARCH_FRETS = 12

### CANDIDATE_REACH is how many frets either side of a chord's anchor fret
### count as playable when highlighting candidate chord tones.
### open strings are always playable, whatever the anchor.
CANDIDATE_REACH = 4

### VOICING_REACH_BELOW and VOICING_REACH_ABOVE define the (asymmetric) hand span
### searched around the root when the voicing generator builds a chord shape.
VOICING_REACH_BELOW = 2
VOICING_REACH_ABOVE = 3

### MIN_VOICING_TONES is the number of distinct chord tones a generated voicing
### must contain to be accepted, capped at the number of tones in the chord.
### (so a power chord needs both of its 2 tones, and a triad needs all 3)
MIN_VOICING_TONES = 3

### label returned by chord identification when no notes have been pinned:
NO_NOTES_MESSAGE = 'No notes pinned'


############# audio interface settings:

### concert pitch of A4, in Hz:
A4_PITCH = 440.0

### delay between successive strings in a strum, in seconds.
### the engine only supplies ordered (frequency, string) pairs; this value
### is exposed for whatever plays them back.
STRUM_DELAY = 0.035


############# display settings:

### MARKERS are prefixed to the repr of fretwork objects that have no brackets:
MARKERS = { 'Note': '♩',
            }

### BRACKETS are placed around the string representations of fretwork objects,
### so that they can be identified at a glance:
BRACKETS = {  'Scale': ['𝄢 ', ''],
       'ChordQuality': ['~', '~'],
              'Chord': ['♬ ', ''],
           'Position': ['(', ')'],
            'Voicing': ['〚', '〛'],
             'Guitar': ['〚', ' 〛'],
      'SelectedChord': ['⟦', '⟧'],
            }

### CHARACTERS are used in text diagrams to compactly denote certain traits:
CHARACTERS = {  'muted': 'X',
           'fret_sep': '¦',
          'highlight': '⟦⟧',
             }
