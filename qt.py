import importlib
import sys


for qt_lib in ('PyQt5', 'PySide2', 'PyQt6', 'PySide6', None):
    if qt_lib is None:
        raise ImportError("No suitable Qt library found.")
    try:
        QtWidgets = importlib.import_module(qt_lib + '.QtWidgets')
        QtCore = importlib.import_module(qt_lib + '.QtCore')
        QtGui = importlib.import_module(qt_lib + '.QtGui')
        break
    except ImportError:
        pass


def qt_enum(owner, scope, name):
    """Look up an enum value under both Qt6 (scoped) and Qt5 (flat) naming.

    e.g. qt_enum(QtCore.Qt, 'PenStyle', 'NoPen')
    """
    try:
        return getattr(getattr(owner, scope), name)
    except AttributeError:
        return getattr(owner, name)


def mkapp():
    """Return the running QApplication, creating one if needed."""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(sys.argv)
    return app


def run_app():
    app = mkapp()
    if sys.flags.interactive != 1:
        if hasattr(app, 'exec_'):
            sys.exit(app.exec_())
        else:
            sys.exit(app.exec())
