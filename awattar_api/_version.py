# Package semantic version, single source for __init__, client headers and setup.py
__version__ = "0.3.0"
