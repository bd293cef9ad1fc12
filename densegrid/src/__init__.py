"""Implementation modules for :mod:`densegrid`."""
