### semitone intervals between pitch classes, and their names relative to a root.

from .notes import Note

# semitone distances of the common intervals, by name:
Unison = PerfectUnison = 0
MinorSecond = 1
MajorSecond = 2
MinorThird = 3
MajorThird = 4
PerfectFourth = 5
DiminishedFifth = Tritone = 6
PerfectFifth = 7
MinorSixth = AugmentedFifth = 8
MajorSixth = 9
MinorSeventh = 10
MajorSeventh = 11

# short degree names for every interval in the octave, flat-spelled:
degree_names = ['1', 'b2', '2', 'b3', '3', '4', 'b5', '5', 'b6', '6', 'b7', '7']

# broad interval categories used when colouring chord tones:
interval_types = {0: 'root',
                  3: '3rd', 4: '3rd',
                  6: '5th', 7: '5th',
                  10: '7th', 11: '7th'}

def interval_between(root, note):
    """upward distance in semitones from 'root' to 'note', in the range 0-11"""
    return Note.from_cache(note) - Note.from_cache(root)

def interval_degree(root, note):
    """the degree name of 'note' relative to 'root', e.g. 'b3' for Eb above C"""
    return degree_names[interval_between(root, note)]

def interval_type(root, note):
    """the category of 'note' relative to 'root':
    one of 'root', '3rd', '5th', '7th', or 'other'"""
    return interval_types.get(interval_between(root, note), 'other')

def interval_signature(root, notes):
    """the sorted, deduplicated list of intervals from 'root' to each of 'notes'"""
    return sorted(set([interval_between(root, n) for n in notes]))
