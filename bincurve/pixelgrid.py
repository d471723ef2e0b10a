import pathlib
import sys
import numpy

from .errors import InvalidDimensions, InvalidRange, IoFailure
from .hilbert import HilbertCurve, Pos

BLACK  = (0x00, 0x00, 0x00)

# Bytes per pixel, one per channel
BPP = 3


class PixelGrid(object):
    '''
    Row-major buffer of RGB colors, width pixels per row.

    colors is anything numpy can turn into an (n, 3) uint8 array. The
    height is the number of rows needed to hold every color and the last
    row is padded out with fill.
    '''
    def __init__(self, colors, width, fill=BLACK):
        if width < 1:
            raise InvalidDimensions("Width must be positive, got %d" % width)

        colors = numpy.asarray(colors, dtype=numpy.uint8).reshape(-1, BPP)
        count = len(colors)

        # ceil integer div
        height = -(-count // width)

        total = width * height
        assert total >= count, "total should never be less than len so far"

        self.data = numpy.empty((total, BPP), dtype=numpy.uint8)
        self.data[:] = fill
        self.data[:count] = colors

        self.width = width
        self.height = height
        self.fill = tuple(fill)

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
               numpy.array_equal(self.data, other.data)

    def __repr__(self):
        return "PixelGrid(%dx%d)" % (self.width, self.height)

    def copy(self):
        ret = PixelGrid.__new__(PixelGrid)
        ret.data = self.data.copy()
        ret.width = self.width
        ret.height = self.height
        ret.fill = self.fill
        return ret

    @property
    def is_square(self):
        return self.width == self.height

    @property
    def is_hilbert_compatible(self):
        return self.is_square and (self.width & (self.width - 1)) == 0

    def pixels(self):
        '''(height, width, 3) view sharing memory with data'''
        return self.data.reshape(self.height, self.width, BPP)

    def to_index(self, pos):
        return self.to_index_assoc(self.width, pos)

    def index_to_pos(self, index):
        return self.index_to_pos_assoc(self.width, index)

    @staticmethod
    def to_index_assoc(width, pos):
        return pos.y * width + pos.x

    @staticmethod
    def index_to_pos_assoc(width, index):
        return Pos(index % width, index // width)

    def iter_pos(self):
        for y in range(self.height):
            for x in range(self.width):
                yield Pos(x, y)

    def get(self, x, y):
        if not (0 <= x < self.width) or not (0 <= y < self.height):
            raise IndexError("Pixel coordinate (%d, %d) out of range" % (x, y))
        return tuple(int(c) for c in self.data[self.to_index(Pos(x, y))])

    def set(self, x, y, color):
        if not (0 <= x < self.width) or not (0 <= y < self.height):
            raise IndexError("Pixel coordinate (%d, %d) out of range" % (x, y))
        self.data[self.to_index(Pos(x, y))] = color

    def _curve(self):
        if not self.is_square:
            raise InvalidDimensions("Curve passes need a square grid, got %dx%d" %
                                    (self.width, self.height))
        if not self.is_hilbert_compatible:
            raise InvalidDimensions("Curve passes need a power of 2 side, got %d" %
                                    self.width)
        return HilbertCurve(self.width)

    def hilbertify(self):
        curve = self._curve()
        width = self.width

        def f(indices):
            return curve.points_to_values(indices % width, indices // width)

        self.remap_positions(f)

    def unhilbertify(self):
        curve = self._curve()
        width = self.width

        def f(indices):
            xs, ys = curve.values_to_points(indices)
            return ys * width + xs

        self.remap_positions(f)

    def remap_positions(self, f):
        '''
        Move the value at index i to index f(i), for every i at once.

        f gets an array of all source indices and returns the matching
        destinations. Destinations are not ordered, so values are
        written into a fresh copy rather than shuffled in place.
        '''
        indices = numpy.arange(len(self.data), dtype=numpy.int64)
        new_positions = numpy.asarray(f(indices))

        output = self.data.copy()
        output[new_positions] = self.data
        self.data = output

    def to_bytes(self):
        return self.data.tobytes()

    def save(self, path):
        path = pathlib.Path(path).expanduser()
        try:
            with path.open('wb') as f:
                f.write(self.to_bytes())
        except OSError as e:
            raise IoFailure("Failed to write %s: %s" % (path, e)) from e


def parse_bytes(values, width, fill=BLACK, trim_start=0, trim_end=0):
    '''
    Group values into RGB triples and lay them out width pixels per row.

    trim_start and trim_end bytes are dropped from either end first. A
    short final group takes its missing channels from fill.
    '''
    if trim_start < 0 or trim_end < 0:
        raise InvalidRange("Trim lengths must not be negative (%d, %d)" %
                           (trim_start, trim_end))
    if trim_start + trim_end > len(values):
        raise InvalidRange("Trimming %d + %d bytes from a %d byte buffer" %
                           (trim_start, trim_end, len(values)))

    values = bytes(values[trim_start:len(values) - trim_end])

    whole = len(values) // BPP
    if whole:
        colors = numpy.frombuffer(values, dtype=numpy.uint8, count=whole * BPP).reshape(-1, BPP)
    else:
        colors = numpy.zeros((0, BPP), dtype=numpy.uint8)

    tail = values[whole * BPP:]
    if tail:
        last = list(tail) + list(fill[len(tail):])
        colors = numpy.vstack((colors, numpy.array([last], dtype=numpy.uint8)))

    grid = PixelGrid(colors, width, fill=fill)
    print("total amount of pixels: %d, total amount of bytes: %d" %
          (len(grid), len(grid) * BPP), file=sys.stderr)
    return grid

def load(path, width, fill=BLACK, trim_start=0, trim_end=0):
    path = pathlib.Path(path).expanduser()
    try:
        values = path.read_bytes()
    except OSError as e:
        raise IoFailure("Failed to read %s: %s" % (path, e)) from e
    return parse_bytes(values, width, fill=fill,
                       trim_start=trim_start, trim_end=trim_end)
