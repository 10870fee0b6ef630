"""PySide6 front end for the knight's tour engine.

Qt is only imported by the view, sound and app modules, so the controller,
backend and configuration can be used (and tested) without a display.
"""
