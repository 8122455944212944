# tests/__init__.py
"""
Test suite for :mod:`git_storage`.

Puts the checkout root on ``sys.path`` so the package imports without
being installed first.
"""

import pathlib
import sys

CHECKOUT_ROOT = pathlib.Path(__file__).resolve().parent.parent

if str(CHECKOUT_ROOT) not in sys.path:
    sys.path.insert(0, str(CHECKOUT_ROOT))
