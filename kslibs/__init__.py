"""Build, run and configure C++ projects described by a .config.kslibs file."""

__version__ = "0.1.0"