"""
Utilities for using name factories from the command line.
"""
