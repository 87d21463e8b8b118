"""
Simple File Manager - Core Package

An interactive command-line file manager that creates, deletes, renames,
copies and moves files and folders, calculates sizes, lists directories
and searches directory trees by wildcard mask.
"""

__version__ = "0.1.0"
__author__ = "Simple File Manager Team"
