"""
Root conftest - shared pytest configuration and fixtures.
Ensures the lingualearner package is discoverable when running pytest from the repo root.
"""
import os
import sys
from pathlib import Path

# Ensure repo root is in path for 'from lingualearner...' imports
_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# Cheap bcrypt work factor for every test that hashes through real settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")
