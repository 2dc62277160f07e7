"""
Development launcher for the presentation.

Lives next to 'src' so the app can be started from a checkout without an
editable install:

    $ python run.py

Set SENTIENCE_LOG_LEVEL=DEBUG to see navigation and input decisions.
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

if sys.platform == 'win32':
    # Own taskbar group instead of the python.exe one
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID('Sentience.Presentation')

from sentience.app.main import main

if __name__ == "__main__":
    sys.exit(main())
