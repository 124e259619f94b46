"""Tests for the fixture and JSON file history sources."""

import json
from datetime import timedelta

import pytest

from repo_pulse.exceptions import HistorySourceError
from repo_pulse.sources import FixtureSource, JsonFileSource


class TestFixtureSource:
    def test_shape(self, now):
        """Ten commits, one day apart, one author and file each, small diffs."""
        snapshot = FixtureSource(now=now).fetch()
        commits = snapshot.commits

        assert len(commits) == 10
        assert commits[0].timestamp == now
        assert commits[3].timestamp == now - timedelta(days=3)
        assert len({c.author for c in commits}) == 10
        assert all(len(c.files) == 1 for c in commits)
        assert all(c.changed_lines <= 10 for c in commits)
        assert snapshot.current_branch == "main"

    def test_deterministic(self, now):
        assert FixtureSource(now=now).fetch() == FixtureSource(now=now).fetch()

    def test_negative_count(self):
        with pytest.raises(ValueError):
            FixtureSource(count=-1)


class TestJsonFileSource:
    def test_reads_export(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text(
            json.dumps(
                {
                    "current_branch": "develop",
                    "branches": [{"name": "develop", "protected": True}],
                    "commits": [
                        {
                            "sha": "1",
                            "author": {"name": "Alice", "email": "a@x"},
                            "timestamp": "2024-01-01T10:00:00Z",
                            "files": [{"filename": "a.py", "additions": 2, "deletions": 0}],
                            "stats": {"additions": 2, "deletions": 0, "total": 2},
                        }
                    ],
                }
            )
        )
        snapshot = JsonFileSource(path).fetch()
        assert snapshot.current_branch == "develop"
        assert snapshot.branches[0].protected
        assert snapshot.commits[0].files[0].filename == "a.py"

    def test_missing_file(self, tmp_path):
        with pytest.raises(HistorySourceError) as exc_info:
            JsonFileSource(tmp_path / "nope.json").fetch()
        assert "cannot read file" in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(HistorySourceError):
            JsonFileSource(path).fetch()

    def test_malformed_commit(self, tmp_path):
        """A commit without any timestamp is rejected."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"commits": [{"sha": "1"}]}))
        with pytest.raises(HistorySourceError) as exc_info:
            JsonFileSource(path).fetch()
        assert exc_info.value.source == str(path)

    def test_scalar_document(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("42")
        with pytest.raises(HistorySourceError):
            JsonFileSource(path).fetch()
