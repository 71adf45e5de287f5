"""
Shared pytest configuration.

The widget tests run on Qt's offscreen platform so they need no display.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
