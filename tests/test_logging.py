from __future__ import annotations

import logging

from taskhub.config import Settings
from taskhub.infra.logging import LOG_FILE_NAME, setup_logging


def test_setup_logging_creates_log_file(tmp_path) -> None:
    root = logging.getLogger()
    before = list(root.handlers)

    log_file = setup_logging(Settings(log_dir=str(tmp_path / "logs")))

    try:
        assert log_file == tmp_path / "logs" / LOG_FILE_NAME
        assert log_file.exists()
    finally:
        for handler in [h for h in root.handlers if h not in before]:
            root.removeHandler(handler)
            handler.close()
