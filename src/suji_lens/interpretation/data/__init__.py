"""Packaged lexicon versions."""
