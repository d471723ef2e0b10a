import json
import sys


def exit_message(message, prefer_cli=True):
    '''
    Report a fatal error and exit with status 1.

    With prefer_cli=False the message also goes to a dialog when a Qt
    application is already running.
    '''
    print(message, file=sys.stderr)
    if not prefer_cli:
        try:
            from PyQt5 import QtWidgets
        except ImportError:
            QtWidgets = None
        if QtWidgets is not None and QtWidgets.QApplication.instance():
            QtWidgets.QMessageBox.critical(None, "bincurve", str(message))
    sys.exit(1)

def json_load_exit_bad(fn, option):
    try:
        with open(fn, "r") as f:
            return json.load(f)
    except OSError as e:
        exit_message("Could not open %s file %s: %s" % (option, fn, e))
    except json.JSONDecodeError as e:
        exit_message("Bad json in %s file %s: %s" % (option, fn, e))
