### preset tunings for fretted instruments, grouped by number of strings.
### notes are listed from the lowest-pitched string to the highest,
### as the strings are indexed everywhere else in the library.

tunings_by_strings = {
    4: {'Standard (Bass)':   'E A D G',
        'Drop D (Bass)':     'D A D G',
        'Ukulele Standard':  'G C E A'},

    5: {'Standard (Bass)':   'B E A D G',
        'Drop A (Bass)':     'A E A D G'},

    6: {'Standard E':        'E A D G B E',
        'Drop D':            'D A D G B E',
        'Eb Standard':       'D# G# C# F# A# D#',
        'Drop C#':           'C# G# C# F# A# D#',
        'Drop C':            'C G C F A D',
        'Open D':            'D A D F# A D',
        'Open G':            'D G D G B D',
        'DADGAD':            'D A D G A D'},

    7: {'Drop A':            'A E A D G B E',
        'Standard B':        'B E A D G B E',
        'Drop G':            'G D G C F A D'},

    8: {'Drop E':            'E B E A D G B E',
        'Standard F#':       'F# B E A D G B E'},

    9: {'Drop B':            'B F# B E A D G B E',
        'Standard C#':       'C# F# B E A D G B E'},
    }

# short names/aliases for common tunings, usable wherever a tuning is expected:
tuning_aliases = {
    'standard':  'E A D G B E',
    'half-step': 'D# G# C# F# A# D#',
    'dropD':     'D A D G B E',
    'dropC':     'C G C F A D',
    'openD':     'D A D F# A D',
    'openG':     'D G D G B D',
    'celtic':    'D A D G A D', # better known as DADGAD
    'bass':      'E A D G',
    'ukulele':   'G C E A',
    }
