### chord qualities and their names - for example, 'Minor 7' and 'Suspended 4' are defined in this module.
### new chord qualities (or aliases for existing ones) can be freely added by following the examples below,
### where hopefully the template is self-explanatory.

### each chord quality is keyed by its full name, and defined by a short name
### and its chord factors as a comma-separated string of scale degrees relative to the root.
### degrees follow the usual conventions: '1, 3, 5' is a major triad, 'b3' is a minor third, etc.
### extensions are written within the octave, so the 9th of an add9 chord is written as '2'.

### note that this dict order is non-arbitrary: chord identification searches qualities
### in this order, so when a partial set of notes fits several qualities, the earliest one names it.
chord_defines = {
    'Major':        ('Maj',   '1, 3, 5'),
    'Minor':        ('min',   '1, b3, 5'),
    'Power Chord':  ('5',     '1, 5'),
    'Major 7':      ('Maj7',  '1, 3, 5, 7'),
    'Minor 7':      ('m7',    '1, b3, 5, b7'),
    'Dominant 7':   ('7',     '1, 3, 5, b7'),
    'Major add9':   ('add9',  '1, 2, 3, 5'),
    'Minor add9':   ('madd9', '1, 2, b3, 5'),
    'Suspended 2':  ('sus2',  '1, 2, 5'),
    'Suspended 4':  ('sus4',  '1, 4, 5'),
    'Diminished':   ('dim',   '1, b3, b5'),
    'Augmented':    ('aug',   '1, 3, #5'),
    }

### alternative names that chord quality lookup will also accept (case-insensitively),
### in addition to the full and short names above:
chord_aliases = {
    'Major':       ['maj', 'M', ''],
    'Minor':       ['m', 'minor'],
    'Power Chord': ['power', 'fifth'],
    'Major 7':     ['maj7', 'M7', 'Δ7'],
    'Minor 7':     ['min7', '-7'],
    'Dominant 7':  ['dom7', 'dominant'],
    'Major add9':  ['add2'],
    'Minor add9':  ['minadd9'],
    'Suspended 2': ['sus 2'],
    'Suspended 4': ['sus', 'sus 4'],
    'Diminished':  ['dim', 'o', '°'],
    'Augmented':   ['aug', '+'],
    }
