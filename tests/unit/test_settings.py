"""Tests for config.settings — values validated when Settings is built."""

import pytest
from pydantic import ValidationError

from config.settings import Settings
from src.pm_common.enums import RemainderPolicy


class TestRemainderPolicySetting:
    def test_default(self) -> None:
        assert Settings(_env_file=None).REMAINDER_POLICY is RemainderPolicy.UNREDUCED_SUM

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REMAINDER_POLICY", "FLOORED_SUM")
        assert Settings(_env_file=None).REMAINDER_POLICY is RemainderPolicy.FLOORED_SUM

    def test_unknown_value_rejected_at_startup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REMAINDER_POLICY", "ROUND_ROBIN")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
