"""
Tools for the file manager.

This module contains the mask translator, the filesystem provider, the
progress indicator, the search engine and the plain file operations.
"""
