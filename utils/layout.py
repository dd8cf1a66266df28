"""
Layout Module - Greedy multi-column text layout for works pages

The browser widget (static/js/dynamic-columns.js) measures real rendered
text; this module runs the same packing with an estimated measurement so
works pages are served already split into columns and never flash a single
long paragraph before the script runs.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional


SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+')
SENTENCES_PER_PARAGRAPH = 3
PARAGRAPH_MAX_CHARS = 300
MAX_COLUMNS = 10

DEFAULT_COLUMN_WIDTH = 200
DEFAULT_COLUMN_GAP = 40

# Vertical space taken by the page chrome around the columns
CONTAINER_PADDING = 80
INFO_SECTION_HEIGHT = 60
VIEWPORT_RESERVE = 100

# Horizontal space reserved for the image strip that follows the text
IMAGE_WIDTH = 573.244
IMAGE_MARGIN = 40
ESTIMATED_IMAGES = 10

PT_TO_PX = 4 / 3
FONT_SIZE_PX = 8 * PT_TO_PX
LINE_HEIGHT_PX = 16 * PT_TO_PX
PARAGRAPH_MARGIN_PX = 16 * PT_TO_PX
# Mean advance width of helvetica lowercase text, in ems
AVERAGE_CHAR_WIDTH_EM = 0.5


def split_sentences(text):
    """Split text at whitespace that follows '.', '!' or '?'"""
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def group_paragraphs(text):
    """
    Regroup free text into display paragraphs.

    A paragraph is closed after every third sentence, as soon as it grows
    past 300 characters, or at the final sentence.
    """
    if not text.strip():
        return []

    sentences = split_sentences(text)
    paragraphs = []
    current = ''

    for index, sentence in enumerate(sentences):
        current += (' ' if current else '') + sentence

        should_break = (
            (index + 1) % SENTENCES_PER_PARAGRAPH == 0
            or len(current) > PARAGRAPH_MAX_CHARS
            or index == len(sentences) - 1
        )
        if should_break:
            if current.strip():
                paragraphs.append(current.strip())
            current = ''

    return paragraphs


def extract_text(paragraphs):
    """Flatten source paragraphs into one string of words"""
    return ' '.join(p for p in paragraphs if p).strip()


def max_column_height(viewport_height):
    return viewport_height - CONTAINER_PADDING - INFO_SECTION_HEIGHT - VIEWPORT_RESERVE


def container_width(column_count, column_width=DEFAULT_COLUMN_WIDTH, column_gap=DEFAULT_COLUMN_GAP):
    """Total scroll width for the columns plus the trailing image strip"""
    columns_space = column_count * column_width + (column_count - 1) * column_gap
    image_space = ESTIMATED_IMAGES * IMAGE_WIDTH + ESTIMATED_IMAGES * IMAGE_MARGIN
    return CONTAINER_PADDING + columns_space + image_space


class TextMeasurer:
    """
    Estimates the rendered height of text set in the column style
    (8pt helvetica on a 16pt line, 16pt between paragraphs).

    Words wrap greedily; a word wider than the column breaks across as many
    lines as it needs, mirroring ``word-wrap: break-word``.
    """

    def __init__(self, column_width=DEFAULT_COLUMN_WIDTH, font_size=FONT_SIZE_PX,
                 line_height=LINE_HEIGHT_PX, paragraph_margin=PARAGRAPH_MARGIN_PX,
                 char_width_em=AVERAGE_CHAR_WIDTH_EM):
        self.column_width = column_width
        self.line_height = line_height
        self.paragraph_margin = paragraph_margin
        self.char_width = font_size * char_width_em

    def text_width(self, text):
        return len(text) * self.char_width

    def line_count(self, paragraph):
        lines = 0
        line_width = 0.0
        space = self.char_width

        for word in paragraph.split():
            width = self.text_width(word)
            if width > self.column_width:
                # Overlong words start on a fresh line and wrap mid-word
                if line_width:
                    lines += 1
                spans = math.ceil(width / self.column_width)
                lines += spans - 1
                line_width = width - (spans - 1) * self.column_width
                continue
            if line_width and line_width + space + width <= self.column_width:
                line_width += space + width
            else:
                if line_width:
                    lines += 1
                line_width = width

        if line_width:
            lines += 1
        return lines

    def height(self, text):
        paragraphs = group_paragraphs(text)
        if not paragraphs:
            return 0
        lines = sum(self.line_count(p) for p in paragraphs)
        # The last paragraph's bottom margin collapses out of the measured box
        return lines * self.line_height + (len(paragraphs) - 1) * self.paragraph_margin

    __call__ = height


def build_column(remaining_words, measure: Callable[[str], float], max_height):
    """
    Take words from the front of ``remaining_words`` while the column still
    fits. A column always receives at least one word.
    """
    column_words = []

    for word in remaining_words:
        test_text = ' '.join(column_words + [word])
        if measure(test_text) > max_height and column_words:
            break
        column_words.append(word)

    if not column_words and remaining_words:
        column_words.append(remaining_words[0])

    return column_words


def distribute_words(words, measure, max_height, max_columns=MAX_COLUMNS):
    """Pack words into at most ``max_columns`` columns; overflow is dropped"""
    columns = []
    remaining = list(words)

    while remaining and len(columns) < max_columns:
        column_words = build_column(remaining, measure, max_height)
        columns.append(column_words)
        remaining = remaining[len(column_words):]

    return columns


@dataclass
class Column:
    index: int
    paragraphs: List[str]

    @property
    def css_class(self):
        return 'first column ie' if self.index == 0 else 'column ie'


@dataclass
class ColumnLayout:
    columns: List[Column] = field(default_factory=list)
    column_width: int = DEFAULT_COLUMN_WIDTH
    column_gap: int = DEFAULT_COLUMN_GAP
    max_height: float = 0

    @property
    def container_width(self):
        return container_width(len(self.columns), self.column_width, self.column_gap)


def columnize(paragraphs, column_width=DEFAULT_COLUMN_WIDTH, column_gap=DEFAULT_COLUMN_GAP,
              viewport_height=900, measure: Optional[Callable[[str], float]] = None):
    """
    Lay source paragraphs out as fixed-height columns.

    Returns a ColumnLayout whose columns hold regrouped paragraphs. Text-free
    input comes back untouched as a single first column.
    """
    limit = max_column_height(viewport_height)
    layout = ColumnLayout(column_width=column_width, column_gap=column_gap, max_height=limit)

    all_text = extract_text(paragraphs)
    if not all_text:
        layout.columns = [Column(0, list(paragraphs))]
        return layout

    if measure is None:
        measure = TextMeasurer(column_width)

    words = all_text.split()
    for index, column_words in enumerate(distribute_words(words, measure, limit)):
        layout.columns.append(Column(index, group_paragraphs(' '.join(column_words))))

    return layout


__all__ = [
    'split_sentences',
    'group_paragraphs',
    'extract_text',
    'max_column_height',
    'container_width',
    'TextMeasurer',
    'build_column',
    'distribute_words',
    'Column',
    'ColumnLayout',
    'columnize',
]
