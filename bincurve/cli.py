import pathlib
import sys
import time

from . import pixelgrid
from .config import Config, check_color
from .errors import BincurveError
from .render_image import PngRenderer
from .util import json_load_exit_bad, exit_message


def parse_color(s):
    '''"r,g,b" with each channel in any int() base, ex: 0x10,0,255'''
    parts = s.split(",")
    if len(parts) != 3:
        raise ValueError("Expected 3 channels, got %r" % s)
    return check_color(int(p.strip(), 0) for p in parts)

def timed(config, name, f):
    t = time.time()
    ret = f()
    if config.debug:
        print("%s time %.4f" % (name, time.time() - t))
    return ret

def process(config, renderer=None):
    '''Load, reorder and hand off the grid as described by config'''
    grid = timed(config, "load", lambda: pixelgrid.load(
        config.input, config.width, fill=config.fill,
        trim_start=config.trim_start, trim_end=config.trim_end))
    print("Grid is %dx%d" % (grid.width, grid.height))

    if config.unhilbertify:
        timed(config, "unhilbertify", grid.unhilbertify)

    if config.save_path:
        timed(config, "hilbertify", grid.hilbertify)
        grid.save(config.save_path)
        print("Saved %d bytes to %s" % (len(grid) * pixelgrid.BPP, config.save_path))
        return grid

    if renderer is None:
        if config.png_path:
            renderer = PngRenderer(config.png_path, scale=config.scale)
        else:
            # Only pull in Qt when a window is wanted.
            from .qtui import QtRenderer
            renderer = QtRenderer(title=pathlib.Path(config.input).name,
                                  scale=config.scale)
    renderer.show(grid)
    return grid

def run(argv=None, renderer=None):
    import argparse

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        exit_message("Arguments required, try --help")

    parser = argparse.ArgumentParser(
        description='View a binary file as RGB pixels, optionally along a Hilbert curve')
    parser.add_argument('--trim-start', type=str, help='Bytes to drop from the start')
    parser.add_argument('--trim-end', type=str, help='Bytes to drop from the end')
    parser.add_argument('--fill', type=str,
                        help='Fill color r,g,b for padding and short groups')
    parser.add_argument('--unhilbertify', action='store_true',
                        help='Undo a Hilbert curve ordering after loading')
    parser.add_argument('-o', '--save', help='Write the hilbertified grid as raw bytes')
    parser.add_argument('--png', help='Write a PNG snapshot instead of opening a window')
    parser.add_argument('--scale', type=int, help='Display magnification')
    parser.add_argument('--config', help='Load option defaults from .json')
    parser.add_argument('--debug', action='store_true', help='Print timing information')
    parser.add_argument('input', help='Input binary file')
    parser.add_argument('width', nargs='?', type=str, help='Pixels per row')
    args = parser.parse_args(argv)

    config = Config()
    if args.config:
        try:
            config.update(json_load_exit_bad(args.config, "--config"))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            exit_message("Bad --config %s: %s" % (args.config, e))
    config.input = args.input
    try:
        if args.width:
            config.width = int(args.width, 0)
        if args.trim_start:
            config.trim_start = int(args.trim_start, 0)
        if args.trim_end:
            config.trim_end = int(args.trim_end, 0)
        if args.fill:
            config.fill = parse_color(args.fill)
    except ValueError as e:
        exit_message("Bad argument: %s" % (e,))
    if args.unhilbertify:
        config.unhilbertify = True
    if args.save:
        config.save_path = args.save
    if args.png:
        config.png_path = args.png
    if args.scale is not None:
        config.scale = args.scale
    if args.debug:
        config.debug = True

    if not config.width:
        exit_message("width required")
    if config.scale < 1:
        exit_message("scale must be at least 1, got %d" % config.scale)

    try:
        process(config, renderer=renderer)
    except BincurveError as e:
        exit_message(str(e))
    return 0

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
