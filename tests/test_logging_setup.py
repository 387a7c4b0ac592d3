import logging

import pytest

from notepad.logging_setup import qt_log_level

QtCore = pytest.importorskip("PySide6.QtCore")


def test_qt_message_types_map_to_logging_levels():
    t = QtCore.QtMsgType
    assert qt_log_level(t.QtDebugMsg) == logging.DEBUG
    assert qt_log_level(t.QtInfoMsg) == logging.INFO
    assert qt_log_level(t.QtWarningMsg) == logging.WARNING
    assert qt_log_level(t.QtCriticalMsg) == logging.ERROR
    assert qt_log_level(t.QtFatalMsg) == logging.CRITICAL
