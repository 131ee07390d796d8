"""Command line interface for the MIDI configurator."""
