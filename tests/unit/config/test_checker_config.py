import json
from os import getcwd
from os.path import join

import pytest
from pydantic import ValidationError

from linkstate.url_checker import CheckerConfig


class TestCheckerConfig:
    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = CheckerConfig()
        assert config.timeout == 10
        assert config.max_redirects == 10
        assert config.verify_ssl is True
        assert config.report_dir == join(getcwd(), "reports", "link_checker")

    @pytest.mark.parametrize("field, value", [
        ("timeout", 0),
        ("max_redirects", -1),
        ("recheck_minutes", -5),
        ("user_agent", "   "),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            CheckerConfig(**{field: value})

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"timeout": 3, "max_redirects": 4, "report_dir": "/tmp/links"}))
        config = CheckerConfig.load_from_file(path)
        assert config.timeout == 3
        assert config.max_redirects == 4
        assert config.report_dir == "/tmp/links"

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CheckerConfig.load_from_file(tmp_path / "missing.json")

    def test_load_uses_file_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert CheckerConfig.load().max_redirects == 10
        (tmp_path / "link_checker_config.json").write_text(json.dumps({"max_redirects": 2}))
        assert CheckerConfig.load().max_redirects == 2
