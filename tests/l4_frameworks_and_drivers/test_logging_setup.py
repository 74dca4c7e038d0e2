"""Tests for file logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from panda_nexus.l4_frameworks_and_drivers.logging_setup import setup_file_logging


class TestSetupFileLogging:
    def test_writes_to_log_file(self, tmp_path: Path):
        root = logging.getLogger('pnx')
        before = list(root.handlers)
        try:
            log_path = setup_file_logging(tmp_path / 'logs')
            logging.getLogger('pnx.llm').warning('upstream said no')
            for handler in root.handlers:
                handler.flush()

            assert log_path == tmp_path / 'logs' / 'pnx_debug.log'
            text = log_path.read_text(encoding='utf-8')
            assert 'Debug logging started' in text
            assert 'WARNING upstream said no' in text
        finally:
            for handler in root.handlers[len(before) :]:
                handler.close()
                root.removeHandler(handler)
