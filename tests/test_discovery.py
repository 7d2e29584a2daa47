"""
Tests for table discovery.
"""
from duckgpt.discovery import discover_tables


class TestDiscoverTables:
    """Test listing of candidate tables."""

    def test_json_then_csv(self, table_dir):
        assert discover_tables(table_dir) == ["numbers.json", "papaya_trees.json", "papayas.csv"]

    def test_defaults_to_cwd(self, table_dir, monkeypatch):
        monkeypatch.chdir(table_dir)
        assert discover_tables() == ["numbers.json", "papaya_trees.json", "papayas.csv"]

    def test_empty_dir(self, tmp_path):
        assert discover_tables(tmp_path) == []

    def test_ignores_directories(self, tmp_path):
        (tmp_path / "archive.json").mkdir()
        assert discover_tables(tmp_path) == []
