#### string parsing functions
from .util import unpack_and_reverse_dict, log
from . import _settings
import string

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

if _settings.PREFER_UNICODE_ACCIDENTALS:
    sh = sharp = '♯'
else:
    sh = sharp = '#'


################### note names

natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

# the canonical spelling of each pitch class, by position (where C is 0).
# the engine always reports notes with these names:
chromatic_note_names = ['C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B']

# map every accepted note name to its position (surjective: C# and Db both map to 1)
note_positions = {}
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            note_positions[f'{n}{acc}'] = (natural_positions[n] + offset) % 12

valid_note_names = set(note_positions.keys())

# names as printed in text diagrams, which may use unicode sharps:
display_note_names = [name.replace('#', sh) for name in chromatic_note_names]
canonical_display_names = dict(zip(chromatic_note_names, display_note_names))


################### note name parsing functions:

def is_valid_note_name(name: str, case_sensitive=True):
    """returns True if string can be cast to a Note,
    and False if it cannot"""
    if not isinstance(name, str) or not (0 < len(name) < 4):
        return False
    if not case_sensitive:
        # force first char to upper case and rest to lower, in case we've been
        # given e.g. lowercase 'c' or 'eb', which are valid if not case_sensitive
        name = name[0].upper() + name[1:].lower()
    return name in note_positions

def begins_with_valid_note_name(name: str):
    """checks if a string contains a valid note name in its first three characters.
    returns the length of the longest note name found there (3, 2 or 1),
    or False if there is none."""
    for length in (3, 2, 1):
        if len(name) >= length and is_valid_note_name(name[:length]):
            return length
    return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first one to three characters
    (like a tuning string, e.g. EbAbDbGbBbEb)
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 3 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def parse_out_note_names(note_string, graceful_fail=False):
    """for some string of valid note letters, of undetermined length,
    such as e.g.: 'EADGBE' or 'D#G#C#F#A#D#', parse out the individual notes
    and return a list of the note name strings.
    if graceful_fail, returns False upon failure to parse, instead of error."""

    assert isinstance(note_string, str), f'parse_out_note_names expected str input but got: {type(note_string)}'

    # try looking for obvious split chars first before attempting char-wise split:
    for char in '-, ':
        if char in note_string:
            note_list = [n for n in note_string.split(char) if n != '']
            if len(note_list) >= 2 and all([is_valid_note_name(n) for n in note_list]):
                return note_list
            # otherwise continue trying to split the string into notes as normal

    note_list = []
    # use recursive note_split to break the string apart note-by-note:
    rest = note_string.replace(' ', '')
    while len(rest) > 0:
        result = note_split(rest, graceful_fail=True)
        # catch failure:
        if result is False:
            if graceful_fail:
                return False
            else:
                raise ValueError(f'Error while parsing out note names from {note_string}: No valid note names found in {rest} (note names found so far: {note_list})')
        note_name, rest = result
        note_list.append(note_name)
    log(f'Parsed {note_string} into notes: {note_list}')
    return note_list


################### integer / fret parsing functions:

def parse_out_integers(integers, expected_len=None):
    """accepts a string or list of integers, or strings of integers,
    and returns a strict list of integers (or None object for non-integers).
    used for tab strings like 'x32010', or with separators, like 'x-10-12-12-11-x'"""
    if isinstance(integers, (list, tuple)):
        ints_list = [int(i) if (isinstance(i, int) or (isinstance(i, str) and i.isnumeric())) else None for i in integers]
    elif isinstance(integers, str):
        if ((expected_len is not None) and (len(integers) == expected_len)) or (expected_len is None and auto_split(integers) == [integers]):
            # simply parse numbers out of string, one character per string
            ints_list = [int(i) if i.isdigit() else None for i in integers]
        else:
            # assume there must be some sep char:
            ints_list = [int(i) if i.isnumeric() else None for i in auto_split(integers)]
    else:
        raise TypeError(f'Expected iterable or string for parse_out_integers input, but got {type(integers)}')
    return ints_list

def auto_split(inp, allow='', allow_numerals=True, allow_letters=True):
    """takes a string 'inp' and automatically separates it by the first char found that is
        not in the whitelist iterable 'allow'.
    'allow' should be a string of characters that are NOT to be treated as separators.
    if 'allow_numerals' is True, allow all the digit characters from 0 to 9.
    if 'allow_letters' is True, allow all the upper and lowercase English alphabetical chars."""

    whitelist = set(allow)
    if allow_numerals:
        whitelist.update(string.digits)
    if allow_letters:
        whitelist.update(string.ascii_letters)

    # move forward and find the first char not in whitelist,
    # then treat it as a sep-char (while also stripping surrounding whitespace)
    sep_char = None
    for c in inp:
        # specifically allow whitespace, to catch separators like ' - ', but look for whitespace as sep later
        if c not in whitelist and c != ' ':
            sep_char = c
            break
    if sep_char is None and ' ' in inp:
        # if no separator found yet, use whitespace if it is in the string:
        sep_char = ' '

    if sep_char is None:
        # if no separator found,
        # return input as single list item
        return [inp]
    else:
        # split along detected separator
        splits = inp.split(sep_char)
        # strip whitespace in addition: in case our sep is something like ', '
        splits = [s.strip() for s in splits]
        splits = [s for s in splits if s != ''] # omit emptystring splits (handles stacked whitespace chars in input )
        return splits


################### scale degree parsing functions:

# semitone offsets of the natural degrees of the major scale:
natural_degree_offsets = {1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11}

def parse_degree(degree):
    """accepts a string denoting a scale degree relative to a root, like '3' or 'b3' or '#4',
    and returns its semitone offset from the root (in the range 0-11)"""
    degree = degree.strip()
    numerals = ''.join([c for c in degree if c.isdigit()])
    acc = degree[:len(degree)-len(numerals)]
    if len(numerals) == 0 or not degree.endswith(numerals):
        raise ValueError(f'Could not parse scale degree: {degree}')
    if acc not in accidental_offsets:
        raise ValueError(f'Invalid accidental in scale degree: {degree}')
    # degrees above the octave wrap back down into it, i.e. the 9th is the 2nd:
    number = ((int(numerals) - 1) % 7) + 1
    return (natural_degree_offsets[number] + accidental_offsets[acc]) % 12

def parse_out_degrees(degree_string):
    """accepts a comma-separated string of scale degrees, like '1, b3, 5',
    and returns the list of their semitone offsets, like [0, 3, 7]"""
    return [parse_degree(d) for d in degree_string.split(',') if d.strip() != '']
