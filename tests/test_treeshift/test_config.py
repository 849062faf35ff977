"""Tests for configuration."""

from treeshift.config import parse_bool, read_env_file


class TestReadEnvFile:
    def test_reads_env_values(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("TREESHIFT_ENCODING=latin-1\nTREESHIFT_LOG_LEVEL=debug\n")
        monkeypatch.chdir(tmp_path)

        result = read_env_file(["TREESHIFT_ENCODING", "TREESHIFT_LOG_LEVEL"])
        assert result == {"TREESHIFT_ENCODING": "latin-1", "TREESHIFT_LOG_LEVEL": "debug"}

    def test_strips_quotes(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text('KEY1="quoted"\nKEY2=\'single\'\n')
        monkeypatch.chdir(tmp_path)

        result = read_env_file(["KEY1", "KEY2"])
        assert result["KEY1"] == "quoted"
        assert result["KEY2"] == "single"

    def test_skips_comments_and_blank_lines(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\nKEY1=value1\n\n")
        monkeypatch.chdir(tmp_path)

        assert read_env_file(["KEY1"]) == {"KEY1": "value1"}

    def test_only_requested_keys(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("KEY1=value1\nKEY2=value2\n")
        monkeypatch.chdir(tmp_path)

        assert "KEY2" not in read_env_file(["KEY1"])

    def test_missing_file_returns_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert read_env_file(["KEY1"]) == {}

    def test_empty_values_skipped(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("KEY1=\n")
        monkeypatch.chdir(tmp_path)

        assert read_env_file(["KEY1"]) == {}


class TestParseBool:
    def test_truthy_values(self):
        for value in ("true", "TRUE", "1", "yes", " on "):
            assert parse_bool(value) is True

    def test_falsy_values(self):
        for value in ("false", "0", "no", "", "off"):
            assert parse_bool(value) is False
