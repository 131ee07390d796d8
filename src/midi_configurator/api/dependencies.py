"""Shared FastAPI dependencies."""

from fastapi import Request

from midi_configurator.config import Settings
from midi_configurator.payments.notifications import Mailer


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_mailer(request: Request) -> Mailer:
    """Mailer created for the running application."""
    return request.app.state.mailer
