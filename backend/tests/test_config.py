"""
Movie Library API - Settings Tests
==================================

What:  Validation and parsing rules of the pydantic-settings configuration.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from movielib.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        config = Settings(_env_file=None)
        assert config.app_port == 8000
        assert config.log_level == "INFO"
        assert config.review_missing_movie_status == 400
        assert config.welcome_message == "🎬 Welcome to Movie Library API!"

    def test_log_level_is_uppercased(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError, match="Invalid log_level"):
            Settings(_env_file=None, log_level="chatty")

    def test_missing_movie_status_accepts_404(self):
        assert Settings(_env_file=None, review_missing_movie_status=404).review_missing_movie_status == 404

    def test_missing_movie_status_rejects_other_codes(self):
        with pytest.raises(PydanticValidationError, match="Must be 400 or 404"):
            Settings(_env_file=None, review_missing_movie_status=422)

    def test_cors_origins_list(self):
        config = Settings(_env_file=None, cors_origins="http://a.test, http://b.test ,")
        assert config.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("APP_PORT", "9090")
        monkeypatch.setenv("REVIEW_MISSING_MOVIE_STATUS", "404")
        config = Settings(_env_file=None)
        assert config.app_port == 9090
        assert config.review_missing_movie_status == 404

    def test_access_log_skip_paths_list(self):
        config = Settings(_env_file=None, access_log_skip_paths="/health, /")
        assert config.access_log_skip_paths_list == ["/health", "/"]
        assert Settings(_env_file=None).access_log_skip_paths_list == ["/health"]
