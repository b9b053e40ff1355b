"""Tests for Settings parsing and validation."""

import logging

import pytest

from tierchess.config import Settings


class TestDefaults:
    def test_values(self) -> None:
        settings = Settings()
        assert settings.ai_level == 5
        assert settings.log_level == "WARNING"
        assert settings.seed is None
        assert settings.max_plies == 200

    def test_logging_level(self) -> None:
        assert Settings(log_level="debug").logging_level == logging.DEBUG

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Settings().ai_level = 3  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"ai_level": 0},
            {"ai_level": 11},
            {"log_level": "LOUD"},
            {"max_plies": 0},
        ],
    )
    def test_rejects(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            Settings(**kwargs)  # type: ignore[arg-type]


class TestFromMapping:
    def test_empty_mapping_gives_defaults(self) -> None:
        assert Settings.from_mapping({}) == Settings()

    def test_parses_strings(self) -> None:
        settings = Settings.from_mapping(
            {
                "AI_LEVEL": " 9 ",
                "LOG_LEVEL": "INFO",
                "SEED": "42",
                "MAX_PLIES": "60",
            }
        )
        assert settings == Settings(
            ai_level=9,
            log_level="INFO",
            seed=42,
            max_plies=60,
        )

    def test_blank_seed_means_none(self) -> None:
        assert Settings.from_mapping({"SEED": ""}).seed is None

    def test_prefix(self) -> None:
        settings = Settings.from_mapping(
            {"APP_AI_LEVEL": "2", "AI_LEVEL": "8"}, prefix="APP_"
        )
        assert settings.ai_level == 2

    @pytest.mark.parametrize(
        "values",
        [
            {"AI_LEVEL": "hard"},
            {"AI_LEVEL": "12"},
            {"SEED": "x"},
            {"LOG_LEVEL": "LOUD"},
        ],
    )
    def test_malformed(self, values: dict[str, str]) -> None:
        with pytest.raises(ValueError):
            Settings.from_mapping(values)

    def test_from_env(self) -> None:
        settings = Settings.from_env(
            {"TIERCHESS_AI_LEVEL": "3", "TIERCHESS_LOG_LEVEL": "info"}
        )
        assert settings.ai_level == 3
        assert settings.logging_level == logging.INFO

    def test_from_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TIERCHESS_MAX_PLIES", "12")
        assert Settings.from_env().max_plies == 12
