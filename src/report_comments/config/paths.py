"""User data directories for report-comments."""

from __future__ import annotations

import os
from pathlib import Path

APP_FOLDER_NAME = ".report_comments"
HOME_ENV_VAR = "REPORT_COMMENTS_HOME"


def app_user_root() -> Path:
    """Return the per-user data root, honouring ``REPORT_COMMENTS_HOME``."""

    override = os.getenv(HOME_ENV_VAR)
    root = Path(override).expanduser() if override else Path.home() / APP_FOLDER_NAME
    root.mkdir(parents=True, exist_ok=True)
    return root


def app_log_dir() -> Path:
    p = app_user_root() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p


__all__ = ["APP_FOLDER_NAME", "HOME_ENV_VAR", "app_log_dir", "app_user_root"]
