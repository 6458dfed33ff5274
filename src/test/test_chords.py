from ..chords import Chord, chord_notes, identify_chord, suggest_chord_quality
from ..qualities import chord_qualities, get_quality, Major, Minor, Diminished, PowerChord
from ..scales import scale_notes
from ..notes import chromatic_notes
from ..positions import Position
from ..util import log
from .testing_tools import compare

standard = 'EADGBE'

def test_chords(verbose=False):
    log.verbose = verbose

    compare(chord_notes('C', 'Major'), ['C', 'E', 'G'])
    compare(chord_notes('C', 'Major add9'), ['C', 'D', 'E', 'G'])
    compare(chord_notes('A', Minor), ['A', 'C', 'E'])

    # chord init by name:
    compare(Chord('Am7').notes, ['A', 'C', 'E', 'G'])
    compare(Chord('F#dim').notes, ['F#', 'A', 'C'])
    compare(Chord('Bbsus4').notes, ['A#', 'D#', 'F'])
    compare(Chord('Caug').notes, ['C', 'E', 'G#'])
    compare(Chord('Cmaj7').notes, ['C', 'E', 'G', 'B'])
    compare(Chord('C5').quality, PowerChord)
    compare(Chord('C').quality, Major)
    compare(Chord('C').name, 'C Major')
    compare(Chord('Db', 'm').short_name, 'C# min')
    compare(Chord(Chord('Em')), Chord('E', 'Minor'))
    compare(Chord('Am'), 'Am')
    compare('C' in Chord('Am'), True)
    compare('D' in Chord('Am'), False)
    compare(Major.on_root('G'), Chord('G'))


def test_identify_chord(verbose=False):
    log.verbose = verbose

    # open chords on a standard guitar:
    c_major = [(1,3), (2,2), (3,0), (4,1), (5,0)] # x32010
    a_minor = [(1,0), (2,2), (3,2), (4,1), (5,0)] # x02210
    compare(identify_chord('C', c_major, standard), 'C Major')
    compare(identify_chord('A', a_minor, standard), 'A Minor')
    compare(identify_chord('C', [Position(0,8), Position(1,10)], standard), 'C Power Chord')
    # positions also accepted as string keys:
    compare(identify_chord('C', ['1-3', '2-2', '3-0'], standard), 'C Major')

    # partial matches take the first quality in table order that contains them:
    compare(identify_chord('C', [(1,3), (2,2)], standard), 'Partial C Major')
    compare(identify_chord('C', [(1,3), (2,1)], standard), 'Partial C Minor')

    # a single interval is never a partial chord:
    compare(identify_chord('C', [(1,3)], standard), 'C (Custom Voicing)')
    compare(identify_chord('C', [(1,3), (4,1)], standard), 'C (Custom Voicing)')
    # nor is anything outside every quality:
    compare(identify_chord('C', [(4,1), (4,2)], standard), 'C (Custom Voicing)')

    compare(identify_chord('C', [], standard), 'No notes pinned')


def test_identify_every_quality(verbose=False):
    log.verbose = verbose

    # every built-in quality on every root is identified exactly,
    # using a tuning of identical strings so each interval sits on its own string:
    for quality in chord_qualities:
        tuning = ['C'] * len(quality)
        for root in chromatic_notes:
            positions = [Position(s, root.position + iv) for s, iv in enumerate(quality.intervals)]
            compare(identify_chord(root, positions, tuning), f'{root.name} {quality.name}')
            compare(identify_chord(root, list(reversed(positions)), tuning), f'{root.name} {quality.name}')


def test_suggest_chord_quality(verbose=False):
    log.verbose = verbose

    c_major = scale_notes('C', 'major')
    compare(suggest_chord_quality('C', c_major), Major)
    compare(suggest_chord_quality('D', c_major), Minor)
    compare(suggest_chord_quality('E', c_major), Minor)
    compare(suggest_chord_quality('G', c_major), Major)
    compare(suggest_chord_quality('B', c_major), Diminished)
    # roots outside the scale fall back on Major:
    compare(suggest_chord_quality('F#', c_major), Major)

    a_minor = scale_notes('A', 'minor')
    compare(suggest_chord_quality('A', a_minor), Minor)
    compare(suggest_chord_quality('C', a_minor), Major)

    # pentatonic scales still hold the triad on their root, and a scale with no triad falls back on Major:
    compare(suggest_chord_quality('C', scale_notes('C', 'major pentatonic')), Major)
    compare(suggest_chord_quality('C', ['C', 'D', 'F']), Major)
