"""Configure test suite environment"""
import os
import sys

# Project root on the path so the src package imports without installation
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)
