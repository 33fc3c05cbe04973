# slicer/grid.py

from collections import namedtuple
from enum import Enum


class FormatError(ValueError):
    """Raised when a grid description or a solution file cannot be parsed."""


class Topping(Enum):
    MUSHROOM = "M"
    TOMATO = "T"


TOPPINGS = (Topping.TOMATO, Topping.MUSHROOM)

Cell = namedtuple("Cell", ["row", "col"])


class Rectangle(namedtuple("Rectangle", ["start_row", "start_col", "end_row", "end_col"])):
    """
    Inclusive cell range (start_row, start_col) - (end_row, end_col).
    str(rect) gives the submission line "r1 c1 r2 c2".
    """
    __slots__ = ()

    @classmethod
    def between(cls, start, end):
        return cls(start.row, start.col, end.row, end.col).normalized()

    def normalized(self):
        return Rectangle(min(self.start_row, self.end_row), min(self.start_col, self.end_col),
                         max(self.start_row, self.end_row), max(self.start_col, self.end_col))

    def cells(self):
        r = self.normalized()
        for row in range(r.start_row, r.end_row + 1):
            for col in range(r.start_col, r.end_col + 1):
                yield Cell(row, col)

    def __str__(self):
        return f"{self.start_row} {self.start_col} {self.end_row} {self.end_col}"


WASTED = -1
WASTED_MARK = "#"
FIRST_SLICE_CHAR = 48  # '0'


def area(rect):
    return (abs(rect.end_row - rect.start_row) + 1) * (abs(rect.end_col - rect.start_col) + 1)


def slice_char(slice_id):
    """
    Diagram character for a slice id: '0'..'9', then 'A' onward.
    The punctuation between '9' and 'A' is skipped.
    """
    candidate = slice_id + FIRST_SLICE_CHAR
    if candidate >= 58:
        candidate += 7
    return chr(candidate)


class Grid:
    """
    The whole pizza: toppings per cell, the slice requirements and the
    bookkeeping needed while it gets cut.

    Each cell is exactly one of:
      - uncut, holding a Topping (toppings[r][c] is a Topping)
      - cut, assigned a slice id (slice_ids[r][c] >= 0)
      - wasted (slice_ids[r][c] == WASTED)
    Cut and wasted cells have toppings[r][c] set to None.
    """

    def __init__(self, toppings, min_ingredient, max_size):
        """
        toppings: list of rows, each a list of Topping
        min_ingredient: minimum number of each topping a slice must hold
        max_size: maximum area of a slice
        """
        self.rows = len(toppings)
        self.cols = len(toppings[0]) if toppings else 0
        self.min_ingredient = min_ingredient
        self.max_size = max_size
        self.toppings = [list(row) for row in toppings]
        self.slice_ids = [[None] * self.cols for _ in range(self.rows)]

        self.used = 0
        self.waste_count = 0
        self.last_slice = 0
        self._remaining = {t: 0 for t in TOPPINGS}
        for row in self.toppings:
            for t in row:
                self._remaining[t] += 1

    @classmethod
    def parse(cls, description):
        """
        Builds a grid from the input text:
          line 1: "<rows> <cols> <min_ingredient> <max_size>"
          then <rows> lines of <cols> characters, each 'T' or 'M'.
        Raises FormatError on anything else.
        """
        lines = description.splitlines()
        if not lines:
            raise FormatError("empty grid description")

        header = lines[0].split()
        if len(header) != 4:
            raise FormatError(f"expected 4 header fields, got {len(header)}: {lines[0]!r}")
        try:
            rows, cols, min_ingredient, max_size = (int(v) for v in header)
        except ValueError:
            raise FormatError(f"header fields must be integers: {lines[0]!r}") from None
        if rows < 1 or cols < 1:
            raise FormatError(f"grid dimensions must be positive, got {rows}x{cols}")
        if min_ingredient < 0:
            raise FormatError(f"min ingredient must be >= 0, got {min_ingredient}")
        if max_size < 1:
            raise FormatError(f"max size must be >= 1, got {max_size}")

        body = lines[1:]
        # trailing blank lines are tolerated
        while body and not body[-1].strip():
            body.pop()
        if len(body) != rows:
            raise FormatError(f"expected {rows} grid rows, got {len(body)}")

        by_marker = {t.value: t for t in TOPPINGS}
        toppings = []
        for r, line in enumerate(body):
            if len(line) != cols:
                raise FormatError(f"row {r} has {len(line)} cells, expected {cols}")
            row = []
            for c, ch in enumerate(line):
                if ch not in by_marker:
                    raise FormatError(f"unrecognized topping {ch!r} at row {r}, col {c}")
                row.append(by_marker[ch])
            toppings.append(row)

        return cls(toppings, min_ingredient, max_size)

    @classmethod
    def from_file(cls, path):
        with open(path, "r", encoding="utf-8") as f:
            return cls.parse(f.read())

    # --- queries ---

    @property
    def surface(self):
        return self.rows * self.cols

    def is_uncut(self, cell):
        return self.toppings[cell.row][cell.col] is not None

    def topping_count(self, topping, rect):
        """Number of uncut cells holding `topping` inside rect."""
        r = rect.normalized()
        count = 0
        for row in range(r.start_row, r.end_row + 1):
            line = self.toppings[row]
            for col in range(r.start_col, r.end_col + 1):
                if line[col] is topping:
                    count += 1
        return count

    def remaining(self, topping):
        return self._remaining[topping]

    def remaining_after(self, topping, rect):
        """Toppings of that kind left on the whole grid if rect were cut now."""
        return self._remaining[topping] - self.topping_count(topping, rect)

    def right_of(self, cell):
        col = cell.col + 1
        if col < self.cols and self.toppings[cell.row][col] is not None:
            return Cell(cell.row, col)
        return None

    def below_of(self, cell):
        row = cell.row + 1
        if row < self.rows and self.toppings[row][cell.col] is not None:
            return Cell(row, cell.col)
        return None

    def first_uncut_cell(self):
        for r, line in enumerate(self.toppings):
            for c, t in enumerate(line):
                if t is not None:
                    return Cell(r, c)
        return None

    def is_empty(self):
        return all(v == 0 for v in self._remaining.values())

    def coverage(self):
        """Percentage of the surface committed to slices, two decimals."""
        return round(self.used * 100.0 / self.surface, 2)

    # --- mutation ---

    def cut(self, rect):
        """
        Commits rect as a new slice. Every uncut cell inside gets the same
        slice id; cells already cut or wasted are skipped.
        Returns the normalized rectangle.
        """
        r = rect.normalized()
        slice_id = self.last_slice
        for cell in r.cells():
            t = self.toppings[cell.row][cell.col]
            if t is None:
                continue
            self._remaining[t] -= 1
            self.toppings[cell.row][cell.col] = None
            self.slice_ids[cell.row][cell.col] = slice_id
            self.used += 1
        self.last_slice += 1
        return r

    def waste(self, cell):
        """Throws away a single uncut cell; it will never belong to a slice."""
        t = self.toppings[cell.row][cell.col]
        if t is None:
            raise ValueError(f"cannot waste cell {tuple(cell)}: it is not uncut")
        self._remaining[t] -= 1
        self.toppings[cell.row][cell.col] = None
        self.slice_ids[cell.row][cell.col] = WASTED
        self.waste_count += 1

    # --- reporting ---

    def slice_diagram(self):
        """
        One line per row: '#' for wasted cells, the slice character for cut
        cells and a blank for cells never visited. Past ~90 slices the
        characters stop being meaningful.
        """
        out = []
        for line in self.slice_ids:
            chars = []
            for sid in line:
                if sid is None:
                    chars.append(" ")
                elif sid == WASTED:
                    chars.append(WASTED_MARK)
                else:
                    chars.append(slice_char(sid))
            out.append(" ".join(chars))
        return "\n".join(out) + "\n"


def format_solution(rectangles):
    lines = [str(len(rectangles))]
    lines.extend(str(r) for r in rectangles)
    return "\n".join(lines) + "\n"


def write_solution(path, rectangles):
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_solution(rectangles))


def parse_solution(text):
    """Reads back the output format: a count line, then "r1 c1 r2 c2" lines."""
    lines = [l for l in text.splitlines() if l.strip()]
    if not lines:
        raise FormatError("empty solution")
    try:
        count = int(lines[0])
    except ValueError:
        raise FormatError(f"first line must be the slice count: {lines[0]!r}") from None
    if len(lines) - 1 != count:
        raise FormatError(f"solution declares {count} slices but lists {len(lines) - 1}")
    rectangles = []
    for line in lines[1:]:
        fields = line.split()
        if len(fields) != 4:
            raise FormatError(f"expected 4 coordinates, got {line!r}")
        try:
            rectangles.append(Rectangle(*(int(v) for v in fields)))
        except ValueError:
            raise FormatError(f"coordinates must be integers: {line!r}") from None
    return rectangles
