# log/logger.py
import logging
import os
from datetime import datetime
from typing import Optional


class Logger:
    def __init__(self, log_dir: Optional[str] = None, prefix="nlu_features", console=False):
        self.console = console
        self.logger = logging.getLogger("nlu_features")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # Remove old handlers
        for h in self.logger.handlers[:]:
            self.logger.removeHandler(h)
            h.close()

        # File handler, only when a directory is configured
        self._file_handler = None
        self.log_file = None
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            today = datetime.now().astimezone().strftime("%Y-%m-%d")
            self.log_file = os.path.join(log_dir, f"{prefix}_{today}.log")
            fh = logging.FileHandler(self.log_file, mode="a", encoding="utf-8")
            fh.setFormatter(logging.Formatter("%(asctime)s - %(message)s", "%Y-%m-%d %H:%M:%S"))
            self.logger.addHandler(fh)
            self._file_handler = fh

        # Console handler
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(asctime)s: %(message)s"))
        self.logger.addHandler(ch)
        self._console_handler = ch

    def logMessage(self, message, console=None, file=True):
        if console is None:
            console = self.console
        # Temporarily enable/disable handlers
        if self._file_handler is not None:
            self._file_handler.setLevel(logging.INFO if file else logging.CRITICAL + 1)
        self._console_handler.setLevel(logging.INFO if console else logging.CRITICAL + 1)
        self.logger.info(message)
        self.flush()

    def flush(self):
        for handler in self.logger.handlers:
            handler.flush()

    def close(self):
        for h in self.logger.handlers[:]:
            self.logger.removeHandler(h)
            h.close()
