"""HTTP backend: payment signing, webhook and order notifications."""

from midi_configurator.api.app import create_app

__all__ = ["create_app"]
