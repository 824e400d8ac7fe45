"""Notifier adapters - User notice delivery."""

from .console import ConsoleNotifier

__all__ = ["ConsoleNotifier"]
