from ..intervals import interval_between, interval_degree, interval_type, interval_signature
from ..util import log
from .testing_tools import compare

def test_intervals(verbose=False):
    log.verbose = verbose

    compare(interval_between('C', 'E'), 4)
    compare(interval_between('E', 'C'), 8)
    compare(interval_between('C', 'C'), 0)

    compare(interval_degree('C', 'Eb'), 'b3')
    compare(interval_degree('C', 'F#'), 'b5')
    compare(interval_degree('A', 'G'), 'b7')
    compare(interval_degree('G', 'F#'), '7')

    compare(interval_type('C', 'C'), 'root')
    compare(interval_type('C', 'Eb'), '3rd')
    compare(interval_type('C', 'E'), '3rd')
    compare(interval_type('C', 'Gb'), '5th')
    compare(interval_type('C', 'G'), '5th')
    compare(interval_type('C', 'Bb'), '7th')
    compare(interval_type('C', 'B'), '7th')
    compare(interval_type('C', 'D'), 'other')
    compare(interval_type('C', 'A'), 'other')

    compare(interval_signature('C', ['G', 'E', 'C', 'E']), [0, 4, 7])
    compare(interval_signature('A', ['C', 'E', 'A']), [0, 3, 7])
