import sys
import os

_tests_dir = os.path.dirname(os.path.abspath(__file__))
_src_dir = os.path.abspath(os.path.join(_tests_dir, '..'))

# Run against the source tree when the package is not installed.
sys.path.insert(0, _src_dir)
# Shared event builders (tests/events_helper.py)
sys.path.insert(0, _tests_dir)
