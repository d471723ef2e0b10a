from .bincurveqtui import BincurveUiQt, QtRenderer
