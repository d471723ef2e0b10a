from .config import Config
from .errors import BincurveError, InvalidDimensions, InvalidRange, IoFailure
from .hilbert import HilbertCurve, Pos
from .pixelgrid import PixelGrid, parse_bytes, load, BLACK
from .render_image import render_image, Renderer, NullRenderer, PngRenderer
