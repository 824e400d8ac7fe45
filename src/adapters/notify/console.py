"""
Console notifier adapter - Implements Notifier protocol.

This module provides a console-based implementation of the domain's
notifier port, logging user notices for headless and demo use.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """
    Implements Notifier protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Error notices are logged at WARNING, everything else at INFO.
    """

    def notify(self, title: str, message: str, level: str) -> None:
        """
        Log a user notice (simulates a toast).

        Args:
            title: Short heading
            message: Notice body (already free of secrets)
            level: "success" or "error"
        """
        log_level = logging.WARNING if level == "error" else logging.INFO
        logger.log(log_level, "[NOTICE] %s %s", title, message)
