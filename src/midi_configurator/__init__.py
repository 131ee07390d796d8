"""MIDI controller configurator: part coloring core and checkout backend."""

__version__ = "0.3.0"
