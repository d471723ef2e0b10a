#! /usr/bin/env python3
from PyQt5 import QtCore
from PyQt5 import QtGui
from PyQt5 import QtWidgets

from ..render_image import Renderer, render_image
from ..hilbert import Pos
from ..errors import BincurveError
from ..util import exit_message

ZOOM_STEP = 1.25

class BincurveUiQt(QtWidgets.QMainWindow):
    def __init__(self, grid, *, title="bincurve", scale=1):
        super(BincurveUiQt, self).__init__()
        self.grid = grid
        self.scale = scale
        self.setWindowTitle(title)

        self.pixmapitem = QtWidgets.QGraphicsPixmapItem()
        self.scene = QtWidgets.QGraphicsScene()
        self.scene.addItem(self.pixmapitem)

        self.graphicsView = QtWidgets.QGraphicsView(self.scene)
        self.graphicsView.setAlignment(QtCore.Qt.AlignTop|QtCore.Qt.AlignLeft)
        self.graphicsView.setMouseTracking(True)
        self.graphicsView.viewport().setMouseTracking(True)
        self.graphicsView.viewport().installEventFilter(self)
        self.setCentralWidget(self.graphicsView)

        view_menu = self.menuBar().addMenu("&View")
        self.actionZoomIn = view_menu.addAction("Zoom &In")
        self.actionZoomIn.setShortcut(QtGui.QKeySequence(QtGui.QKeySequence.ZoomIn))
        self.actionZoomIn.triggered.connect(lambda: self.zoom(ZOOM_STEP))
        self.actionZoomOut = view_menu.addAction("Zoom &Out")
        self.actionZoomOut.setShortcut(QtGui.QKeySequence(QtGui.QKeySequence.ZoomOut))
        self.actionZoomOut.triggered.connect(lambda: self.zoom(1 / ZOOM_STEP))
        self.actionZoomReset = view_menu.addAction("&Actual Size")
        self.actionZoomReset.setShortcut(QtGui.QKeySequence("Ctrl+0"))
        self.actionZoomReset.triggered.connect(lambda: self.graphicsView.resetTransform())

        # Keep the array alive, QImage does not copy it.
        self.img = render_image(grid, scale=scale, rgb=True)
        self.qImg = QtGui.QImage(self.img.data,
                                 self.img.shape[1], self.img.shape[0],
                                 3 * self.img.shape[1],
                                 QtGui.QImage.Format_RGB888)
        self.pixmapitem.setPixmap(QtGui.QPixmap(self.qImg))

        self.resize(min(self.img.shape[1] + 40, 1200),
                    min(self.img.shape[0] + 80, 900))
        self.statusBar().showMessage("%dx%d pixels" % (grid.width, grid.height))

    def zoom(self, factor):
        self.graphicsView.scale(factor, factor)

    def scene_to_pos(self, qpoint):
        scene_xy = self.graphicsView.mapToScene(qpoint)
        x = int(scene_xy.x()) // self.scale
        y = int(scene_xy.y()) // self.scale
        if not (0 <= x < self.grid.width) or not (0 <= y < self.grid.height):
            return None
        return Pos(x, y)

    def eventFilter(self, source, event):
        if event.type() == QtCore.QEvent.MouseMove:
            pos = self.scene_to_pos(event.pos())
            if pos is not None:
                color = self.grid.get(pos.x, pos.y)
                index = self.grid.to_index(pos)
                self.statusBar().showMessage(
                    "(%d, %d) index %d offset 0x%x color #%02x%02x%02x" %
                    (pos.x, pos.y, index, index * 3, *color))
        return super(BincurveUiQt, self).eventFilter(source, event)


class QtRenderer(Renderer):
    '''Show the grid in a window and block until it is closed'''
    def __init__(self, title="bincurve", scale=1):
        self.title = title
        self.scale = scale

    def show(self, grid):
        import sys

        # The QApplication must outlive every widget created below.
        app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

        # Allow Ctrl-C to interrupt QT by scheduling GIL unlocks.
        timer = QtCore.QTimer()
        timer.start(500)
        timer.timeout.connect(lambda: None) # Let the interpreter run.

        try:
            window = BincurveUiQt(grid, title=self.title, scale=self.scale)
        except BincurveError as e:
            # Also shown as a dialog
            exit_message(str(e), prefer_cli=False)
        window.show()

        return app.exec_() # Start the event loop.
