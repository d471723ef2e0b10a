from collections import namedtuple
import numpy

from .errors import InvalidDimensions


Pos = namedtuple('Pos', ['x', 'y'])

class HilbertCurve(object):
    '''
    Maps between a position along a Hilbert curve and a point on a
    size x size square, where size is a power of two.
    '''
    def __init__(self, size):
        if size < 1:
            raise InvalidDimensions("Curve size must be positive, got %d" % size)

        order = 0
        current = size
        while current > 1:
            if current % 2 != 0:
                raise InvalidDimensions("Curve size must be a power of 2, got %d" % size)
            current //= 2
            order += 1

        self.__order = order

    @classmethod
    def from_order(cls, order):
        if order < 0:
            raise InvalidDimensions("Curve order must not be negative, got %d" % order)
        return cls(2 ** order)

    @property
    def order(self):
        return self.__order

    @property
    def size(self):
        return 2 ** self.__order

    def __len__(self):
        return self.size * self.size

    def __repr__(self):
        return "HilbertCurve(%d)" % self.size

    @staticmethod
    def rotate(pos, rx, ry, n):
        if ry != 0:
            return pos

        x, y = pos
        if rx == 1:
            x = n - 1 - x
            y = n - 1 - y

        return Pos(y, x)

    def value_to_point(self, value):
        if not (0 <= value < len(self)):
            raise IndexError("Curve index (%d) out of range" % value)

        pos = Pos(0, 0)
        for k in range(self.__order):
            s = 2 ** k

            rx = (value // 2) & 1
            ry = (value ^ rx) & 1

            pos = self.rotate(pos, rx, ry, s)
            pos = Pos(pos.x + s * rx, pos.y + s * ry)

            value //= 4

        return pos

    def point_to_value(self, pos):
        x, y = pos
        n = self.size
        if not (0 <= x < n) or not (0 <= y < n):
            raise IndexError("Curve coordinate (%d, %d) out of range" % (x, y))

        value = 0
        for k in reversed(range(self.__order)):
            s = 2 ** k

            rx = 1 if (x & s) > 0 else 0
            ry = 1 if (y & s) > 0 else 0

            value += s * s * ((3 * rx) ^ ry)

            x, y = self.rotate(Pos(x, y), rx, ry, n)

        return value

    # Array versions of the above, same rules applied element-wise.
    # Used for whole-grid passes where per-pixel Python calls are slow.

    @staticmethod
    def _rotate_arrays(x, y, rx, ry, n):
        turn = ry == 0
        flip = turn & (rx == 1)
        x = numpy.where(flip, n - 1 - x, x)
        y = numpy.where(flip, n - 1 - y, y)
        return numpy.where(turn, y, x), numpy.where(turn, x, y)

    def values_to_points(self, values):
        values = numpy.asarray(values, dtype=numpy.int64)
        if values.size and (values.min() < 0 or values.max() >= len(self)):
            raise IndexError("Curve index out of range")

        x = numpy.zeros_like(values)
        y = numpy.zeros_like(values)
        for k in range(self.__order):
            s = 2 ** k

            rx = (values // 2) & 1
            ry = (values ^ rx) & 1

            x, y = self._rotate_arrays(x, y, rx, ry, s)
            x = x + s * rx
            y = y + s * ry

            values = values // 4

        return x, y

    def points_to_values(self, xs, ys):
        x = numpy.asarray(xs, dtype=numpy.int64)
        y = numpy.asarray(ys, dtype=numpy.int64)
        n = self.size
        if x.size and (x.min() < 0 or x.max() >= n or y.min() < 0 or y.max() >= n):
            raise IndexError("Curve coordinate out of range")

        values = numpy.zeros_like(x)
        for k in reversed(range(self.__order)):
            s = 2 ** k

            rx = ((x & s) > 0).astype(numpy.int64)
            ry = ((y & s) > 0).astype(numpy.int64)

            values += s * s * ((3 * rx) ^ ry)

            x, y = self._rotate_arrays(x, y, rx, ry, n)

        return values
