"""Shared pytest configuration for report-comments tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from report_comments.config.settings import CommentSettings  # noqa: E402
from report_comments.core.placeholders.models import PronounRecord  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_user_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests from writing into the user's real data directory."""

    home = tmp_path / "report_comments_home"
    home.mkdir()
    monkeypatch.setenv("REPORT_COMMENTS_HOME", str(home))
    for env_name in CommentSettings.ENV_MAPPING.values():
        monkeypatch.delenv(env_name, raising=False)
    yield


@pytest.fixture
def he_his() -> PronounRecord:
    return PronounRecord(id="1", pronoun="he", possessive_pronoun="his")


@pytest.fixture
def roster() -> list[PronounRecord]:
    return [
        PronounRecord(id="1", pronoun="he", possessive_pronoun="his"),
        PronounRecord(id="2", pronoun="she", possessive_pronoun="her"),
        PronounRecord(id="3", pronoun="they", possessive_pronoun="their"),
    ]
