"""Packaged data files for paramstate."""
