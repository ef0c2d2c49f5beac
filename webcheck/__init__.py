"""Webcheck: resolve host names and report which ones look like live web servers."""

__version__ = "0.1.0"
