"""命令行单元测试"""
import logging

import pytest

from media_scraper.cli import main


class TestCli:
    """子命令测试"""

    def test_score(self, capsys):
        assert main(["score", "CSI Miami", "CSI: Miami"]) == 0
        assert capsys.readouterr().out.strip() == "1.0000"

    def test_score_compressed(self, capsys):
        assert main(["score", "csimiami", "CSI: Miami", "--compressed"]) == 0
        assert capsys.readouterr().out.strip() == "1.0000"

    def test_compressed_from_config(self, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("scoring:\n  compressed: true\n", encoding="utf-8")
        assert main(["--config", str(path), "score", "csimiami", "CSI: Miami"]) == 0
        assert capsys.readouterr().out.strip() == "1.0000"

    def test_date(self, capsys):
        assert main(["date", "2012/05/04", "yyyy/MM/dd"]) == 0
        assert capsys.readouterr().out.strip() == "2012-05-04"

    def test_date_failure(self, capsys):
        assert main(["date", "2012/05/04", "dd.MM.yyyy"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "2012/05/04" in captured.err

    def test_runtime_default_regex(self, capsys):
        assert main(["runtime", "Runtime: 120 min"]) == 0
        assert capsys.readouterr().out.strip() == "7200000"

    def test_runtime_no_match(self):
        assert main(["runtime", "unknown", "--regex", r"(\d+) minutes"]) == 1

    def test_split_id(self, capsys):
        assert main(["split-id", "tmdb:603"]) == 0
        assert capsys.readouterr().out.split() == ["tmdb", "603"]

    def test_debug_logs_through_module_logger(self, caplog, capsys):
        with caplog.at_level(logging.DEBUG, logger="media_scraper.cli"):
            assert main(["--debug", "split-id", "603"]) == 0
        assert any(r.name == "media_scraper.cli" and "Debug mode enabled" in r.getMessage()
                   for r in caplog.records)
        assert capsys.readouterr().out.strip() == "603"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
