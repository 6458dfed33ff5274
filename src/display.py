from . import parsing, _settings
from .util import log
import math


class Fretboard:
    ### a fretboard display class that is initialised with its data
    ### and then rendered as a text diagram with some display parameters

    # example:
    ### open chord: x32010
    #        E ‖---¦---¦---¦--
    #        B ‖ C ¦---¦---¦--
    #        G ‖---¦---¦---¦--
    #        D ‖   ¦ E ¦---¦--
    #        A ‖   ¦   ¦ C ¦--
    #        E X   ¦   ¦   ¦
    #            1   2   3
    #
    ### high chord: x5453x
    #        E X ¦   ¦   ¦   ¦
    #        B   ¦   ¦   ¦ C ¦--
    #        G   ¦   ¦   ¦ C ¦--
    #        D   ¦   ¦ F#¦---¦--
    #        A   ¦   ¦   ¦ D ¦--
    #        E X ¦   ¦   ¦   ¦
    #              3   4   5

    def __init__(self, cells, index='EADGBE', highlight=None, mute=None, open=None, title=None, num_strings=None):
        """args:
        cells: a dict that keys (string,fret) tuples to the contents of what should be displayed in that fret.
            strings are indexed from 0, the lowest-pitched string, as everywhere else in the library.
            frets are indexed from 1, but there is still a fret 0, i.e. the open string,
            whose contents are shown on the nut rather than in a cell.
        index: labels to display at left of fretboard (from low string to high). 'EADGBE' by default.
        highlight: a list of (string,fret) tuples to highlight
            in addition to whatever contents they might or might not have.
        mute: list of strings to display mute markers (X) next to.
        open: list of strings that ring open. by default, any that are neither muted nor in 'cells'.
        num_strings: defaults to the length of the index."""

        self.index = list(index) if isinstance(index, (list, tuple)) else parsing.parse_out_note_names(index)
        self.num_strings = len(self.index) if num_strings is None else num_strings
        assert len(self.index) == self.num_strings, f'Fretboard index has {len(self.index)} labels for {self.num_strings} strings'
        self.mute = [] if mute is None else list(mute)

        self.title = title

        self.cells = {(s,f): str(c) for (s,f),c in cells.items()}
        self.strings_used = {s for s,f in self.cells.keys()}
        self.frets_used = [f for s,f in self.cells.keys()]
        self.string_contents = {}
        for (s,f), c in self.cells.items():
            self.string_contents.setdefault(s, {})[f] = c
        self.all_contents = list(self.cells.values())

        # we expect highlight to be a list of integer tuples,
        # but if we've been passed a single pair of ints by accident, quietly re-cast it:
        if highlight is not None and len(highlight) > 0 and isinstance(highlight[0], int):
            self.highlight = [tuple(highlight)]
        elif highlight is not None:
            self.highlight = [tuple(h) for h in highlight]
        else:
            self.highlight = []

        ### get min and max extent of fretting positions, but be sensitive to all 0s:
        fretted = [f for f in self.frets_used if f != 0]
        self.max_fret = max(fretted) if len(fretted) > 0 else 0
        self.min_fret = min(fretted) if len(fretted) > 0 else 0

        if open is None:
            self.open = [s for s in range(self.num_strings) if (s not in self.mute) and (s not in self.strings_used)]
        else:
            self.open = list(open)

    def render(self, start_fret=None, end_fret=None, fret_size=None, continue_strings=True, fret_labels=True, index_width=None, align='cleft', title=True):
        """renders data between start_fret and end_fret (detected from data if either are None),
        leaving fret_size between each vertical fret bar (defaults to max([3,max(len(data))]) if None),
        and returns the diagram as a string.

        align must be one of: 'left', 'right', 'cleft' or 'cright'. Latter two align to centre, but rounding left or right."""

        ############## determine length of diagram:

        if start_fret is None:
            # for e.g. chords high on the neck, truncate the diagram by starting on the minimum fret:
            if self.min_fret >= 4 and (self.max_fret - self.min_fret) < 8:
                start_fret = self.min_fret
            # otherwise go from the nut:
            else:
                start_fret = 1

        if end_fret is None:
            end_fret = max([self.max_fret+1, start_fret+2]) # at least 3 frets, otherwise 1 more than max fret

        num_frets_shown = (end_fret - start_fret) + 1

        log(f'Start fret: {start_fret}, end fret: {end_fret}')

        if fret_size is None:
            maxlen = max([len(c) for c in self.all_contents]) if len(self.all_contents) > 0 else 1
            fret_size = max([maxlen, 3])

        if index_width is None:
            index_width = max([len(str(i)) for i in self.index] + [1]) + 1

        ############## define surrounding contents, sepchars etc.:

        fret_sep_char = _settings.CHARACTERS['fret_sep']
        hl_left, hl_right = _settings.CHARACTERS['highlight']
        mute_char = _settings.CHARACTERS['muted']

        if start_fret == 1:
            open_leftborder    = '‖'
            played_leftborder  = '‖'
            muted_leftborder   = mute_char
            footer_leftborder  = ' ' * index_width
        else:
            open_leftborder    = f'--{fret_sep_char}' if continue_strings else f'  {fret_sep_char}'
            played_leftborder  = f'  {fret_sep_char}'
            muted_leftborder   = f'{mute_char} {fret_sep_char}'
            footer_leftborder  = ' ' * (index_width + 3)

        sounded_rightborder = '--' if continue_strings else '  '
        muted_rightborder   = '  '

        empty_fret =   ' ' * fret_size
        sounded_fret = '-' * fret_size

        ############## start piecing together contents

        string_rows = []
        string_margins = []

        ####### loop across strings:
        for s in range(self.num_strings):
            # left border contains the index, right contains either nothing or a string continuation
            string_is_muted = s in self.mute
            string_is_open = (s in self.open) or (0 in self.string_contents.get(s, {}))

            # the string rings from its highest fretted position onward:
            fretted_on_string = [f for f in self.string_contents.get(s, {}).keys() if f != 0]
            this_string_max_fret = max(fretted_on_string) if len(fretted_on_string) > 0 else 0

            ####### loop across frets and define string contents:
            this_string_row = []
            for f in range(num_frets_shown):
                fret_num = start_fret+f
                cell_key = (s, fret_num)
                if cell_key in self.cells:
                    # this cell has content: centre it in the cell
                    content = self.cells[cell_key]
                    remaining_space = max(fret_size - len(content), 0)
                    if align in ['cleft', 'centre', 'center']:
                        left_space = remaining_space // 2
                    elif align == 'cright':
                        left_space = math.ceil(remaining_space/2)
                    elif align == 'left':
                        left_space = 0
                    elif align == 'right':
                        left_space = remaining_space
                    else:
                        raise ValueError(f"arg 'align' to Fretboard.render must be one of: left, right, cleft, cright")
                    content_space = fret_size - left_space
                    this_cell = f'{" "*left_space}{content:{content_space}}'
                else:
                    # this cell has no content, it is empty
                    sounded = (not string_is_muted) and (string_is_open or fretted_on_string)
                    if continue_strings and sounded and fret_num > this_string_max_fret:
                        this_cell = sounded_fret
                    else:
                        this_cell = empty_fret

                # determine right border of cell:
                if cell_key in self.highlight:
                    sep_char = hl_right
                # if the NEXT cell is highlighted, must be a left highlight:
                elif (s, fret_num+1) in self.highlight:
                    sep_char = hl_left
                else:
                    sep_char = fret_sep_char

                this_string_row.append(this_cell + sep_char)

            string_rows.append(this_string_row)

            ####### define borders
            if string_is_muted:
                this_string_leftborder = muted_leftborder
                this_string_rightborder = muted_rightborder
            elif string_is_open:
                this_string_leftborder = open_leftborder
                this_string_rightborder = sounded_rightborder
            else:
                this_string_leftborder = played_leftborder
                this_string_rightborder = sounded_rightborder if fretted_on_string else muted_rightborder

            # a highlighted first fret needs a left highlight on the border:
            if (s,start_fret) in self.highlight:
                this_string_leftborder = this_string_leftborder[:-1] + hl_left
            elif ((s,0) in self.highlight) and (start_fret==1):
                this_string_leftborder = this_string_leftborder[:-1] + hl_right

            this_string_index = self.index[s]
            this_string_leftmargin = f'{str(this_string_index):{index_width}}{this_string_leftborder}'

            string_margins.append((this_string_leftmargin, this_string_rightborder))

        # now turn strings upside down, so the highest string is on top as seen by the player:
        string_rows = list(reversed(string_rows))
        string_margins = list(reversed(string_margins))

        # join cell contents and pad with left/right margins:
        final_rows = [(string_margins[r][0] + ''.join(string_rows[r]) + string_margins[r][1]).rstrip() for r in range(self.num_strings)]

        if title and (self.title is not None):
            final_rows = [str(self.title)] + final_rows

        # and finally put fret labels on the bottom if needed:
        if fret_labels:
            footer_cells = [f'{(start_fret + f):^{fret_size}}' for f in range(num_frets_shown)]
            final_rows.append((footer_leftborder + ' '.join(footer_cells)).rstrip())

        return '\n'.join(final_rows)

    def disp(self, *args, **kwargs):
        """prints the rendered diagram, accepting the same args as render"""
        print(self.render(*args, **kwargs))

    def __str__(self):
        return self.render()


class DataFrame:
    def __init__(self, colnames):
        self.column_names = colnames
        self.num_columns = len(colnames)
        self.column_data = {i:[] for i in range(self.num_columns)}

        self.row_data = []
        self.num_rows = 0

    def append(self, data_lst):
        """add a row of data to this dataframe, which we store as objects"""
        assert len(data_lst) == self.num_columns, f"tried to append row of length {len(data_lst)} but dataframe has {self.num_columns} columns"
        row = data_lst
        self.row_data.append(row)
        self.num_rows += 1

        for i, item in enumerate(row):
            self.column_data[i].append(item)

    def __len__(self):
        """DataFrame length is the number of rows"""
        return self.num_rows

    def column_widths(self, up_to_row=None):
        """return the max str size in each column, up to a specified row"""
        widths = []
        for col_num, col in self.column_data.items():
            str_lens = [len(str(c)) for c in col[:up_to_row]] + [len(self.column_names[col_num])]
            widths.append(max(str_lens))
        return widths

    def render(self, margin=' ', header_border=True, max_rows=None):
        margin_size = len(margin)
        printed_rows = []
        widths = self.column_widths(up_to_row=max_rows)
        # make header:
        header_row = [f'{self.column_names[i]:{widths[i]}}' for i in range(self.num_columns)]
        printed_rows.append(margin.join(header_row).rstrip())
        if header_border:
            total_width = sum(widths) + (self.num_columns-1)*margin_size
            printed_rows.append('='*total_width)
        # make rows:
        for row in self.row_data[:max_rows]:
            this_row = [f'{str(row[i]):{widths[i]}}' for i in range(self.num_columns)]
            printed_rows.append(margin.join(this_row).rstrip())
        return '\n'.join(printed_rows)

    def show(self, *args, **kwargs):
        print(self.render(*args, **kwargs))


def voicing_table(voicings, tuning, preferred_fret=None, max_results=None):
    """lays out a ranked list of Voicings as a table of tab strings, sounded notes, and average fret,
    and returns it as a DataFrame"""
    columns = ['#', 'Tab', 'Notes', 'Avg. fret']
    if preferred_fret is not None:
        columns.append('Dist.')
    df = DataFrame(columns)
    for i, v in enumerate(voicings[:max_results]):
        row = [str(i+1), v.tab(len(tuning)), ' '.join([n.name for n in v.notes(tuning)]), f'{v.mean_fret:.2f}']
        if preferred_fret is not None:
            row.append(f'{v.distance_from(preferred_fret):.2f}')
        df.append(row)
    return df
