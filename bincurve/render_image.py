import cv2 as cv
import numpy
import pathlib

from .errors import InvalidDimensions, IoFailure


def render_image(grid, scale=1, rgb=False):
    '''
    Build a display image from grid, BGR unless rgb is set.

    Each pixel becomes a scale x scale block. The grid is left untouched.
    '''
    if not len(grid):
        raise InvalidDimensions("Nothing to render, grid is empty")
    if scale < 1:
        raise InvalidDimensions("Scale must be positive, got %d" % scale)

    img_display = numpy.copy(grid.pixels())

    if not rgb:
        cv.cvtColor(img_display, cv.COLOR_RGB2BGR, img_display)

    if scale > 1:
        img_display = cv.resize(img_display, None, fx=scale, fy=scale,
                                interpolation=cv.INTER_NEAREST)

    return img_display


class Renderer(object):
    def show(self, grid):
        raise NotImplementedError()

class NullRenderer(Renderer):
    '''Headless stand-in, remembers what it was shown'''
    def __init__(self):
        self.shown = []

    def show(self, grid):
        self.shown.append(grid)

class PngRenderer(Renderer):
    def __init__(self, path, scale=1):
        self.path = pathlib.Path(path).expanduser()
        self.scale = scale

    def show(self, grid):
        img = render_image(grid, scale=self.scale)
        try:
            ok = cv.imwrite(str(self.path), img)
        except cv.error as e:
            raise IoFailure("Failed to write %s: %s" % (self.path, e)) from e
        if not ok:
            raise IoFailure("Failed to write %s" % (self.path,))
        print("Saved %dx%d image to %s" % (img.shape[1], img.shape[0], self.path))
