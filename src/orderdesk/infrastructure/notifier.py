"""Notifier that prints to the terminal through click."""

from __future__ import annotations

import click

from orderdesk.application.notifier import Notifier


class ClickNotifier(Notifier):

    def info(self, message: str) -> None:
        click.secho(message, err=True)

    def success(self, message: str) -> None:
        click.secho(message, fg="green", err=True)

    def warning(self, message: str) -> None:
        click.secho(f"Warning: {message}", fg="yellow", err=True)

    def error(self, message: str) -> None:
        click.secho(f"Error: {message}", fg="red", err=True)
