"""
Test configuration for optisomer test suite.

Adds the src directory to sys.path so tests import the package the same way
whether or not it is installed.
"""
import os
import sys

# Add src directory to Python path for consistent imports
test_dir = os.path.dirname(__file__)
src_dir = os.path.join(test_dir, '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)
