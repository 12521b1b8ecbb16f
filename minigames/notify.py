# -*- coding: utf-8 -*-
"""Outcome notifications: one-way, fire-and-forget messages from engines to the UI."""
import logging

logger = logging.getLogger(__name__)


class Notifier:
    """Default sink: writes every message to the log.

    Views subclass this and override `show` to put the message on screen.
    """

    def success(self, message: str):
        self.show("success", message)

    def info(self, message: str):
        self.show("info", message)

    def error(self, message: str):
        self.show("error", message)

    def show(self, level: str, message: str):
        logger.info("[%s] %s", level, message)
