"""Pytest configuration ensuring the repository root is on sys.path.

Allows `import models...` and `import api...` without installing the package.
"""
import sys
import os

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
