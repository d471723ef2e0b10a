def check_color(color):
    color = tuple(color)
    if len(color) != 3:
        raise ValueError("Expected 3 channels, got %r" % (color,))
    for c in color:
        if not isinstance(c, int) or isinstance(c, bool) or not (0 <= c <= 0xff):
            raise ValueError("Channel %r out of range" % (c,))
    return color

class Config(object):
    # Options that must hold plain ints, with their minimum
    INT_OPTIONS = {'width': 1, 'trim_start': 0, 'trim_end': 0, 'scale': 1}
    BOOL_OPTIONS = ('unhilbertify', 'debug')
    PATH_OPTIONS = ('input', 'save_path', 'png_path')

    def __init__(self):
        self.input = None
        self.width = None
        self.trim_start = 0
        self.trim_end = 0
        self.fill = (0x00, 0x00, 0x00)
        self.unhilbertify = False

        # Output selection. Neither set means open the viewer.
        self.save_path = None
        self.png_path = None

        # Display magnification, nearest neighbour
        self.scale = 1

        self.debug = False

    def update(self, values):
        '''Apply values (ex: loaded from json), raising ValueError on bad ones'''
        for k, v in values.items():
            if not hasattr(self, k):
                raise KeyError("Unknown config option %r" % (k,))
            if k == 'fill':
                if not isinstance(v, (list, tuple)):
                    raise ValueError("fill must be a list of 3 channels, got %r" % (v,))
                v = check_color(v)
            elif k in self.INT_OPTIONS:
                if not isinstance(v, int) or isinstance(v, bool):
                    raise ValueError("%s must be an integer, got %r" % (k, v))
                if v < self.INT_OPTIONS[k]:
                    raise ValueError("%s must be at least %d, got %d" %
                                     (k, self.INT_OPTIONS[k], v))
            elif k in self.BOOL_OPTIONS:
                if not isinstance(v, bool):
                    raise ValueError("%s must be true or false, got %r" % (k, v))
            elif k in self.PATH_OPTIONS:
                if v is not None and not isinstance(v, str):
                    raise ValueError("%s must be a path string, got %r" % (k, v))
            setattr(self, k, v)

    def __repr__(self):
        return "Config(%s)" % ", ".join("%s=%r" % kv for kv in sorted(self.__dict__.items()))
