"""Tests for the command-line entry point."""

import json

from src.main import run


class TestMain:
    """Tests for CLI commands."""

    def test_quote_from_draft_file(self, capsys, tmp_path, catalog_path, draft_path):
        """Test quoting a draft file prints the breakdown JSON."""
        exit_code = run(
            [
                "quote",
                "--catalog", str(catalog_path),
                "--draft", str(draft_path),
                "--drafts-dir", str(tmp_path),
            ]
        )

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["total"] == 1840
        assert output["transportation"] == 175

    def test_save_then_quote_by_id(self, capsys, tmp_path, catalog_path, draft_path):
        """Test a saved draft can be quoted by id."""
        assert run(["save-draft", "--draft", str(draft_path), "--drafts-dir", str(tmp_path)]) == 0
        draft_id = json.loads(capsys.readouterr().out)["draftId"]

        exit_code = run(
            [
                "quote",
                "--catalog", str(catalog_path),
                "--draft-id", draft_id,
                "--drafts-dir", str(tmp_path),
            ]
        )

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["total"] == 1840

    def test_list_drafts(self, capsys, tmp_path, draft_path):
        """Test saved draft ids are listed."""
        run(["save-draft", "--draft", str(draft_path), "--drafts-dir", str(tmp_path)])
        capsys.readouterr()

        assert run(["list-drafts", "--drafts-dir", str(tmp_path)]) == 0
        assert len(json.loads(capsys.readouterr().out)["draftIds"]) == 1

    def test_unknown_draft_id_fails(self, capsys, tmp_path, catalog_path):
        """Test a missing draft id exits with 1 and a JSON error."""
        exit_code = run(
            [
                "quote",
                "--catalog", str(catalog_path),
                "--draft-id", "missing",
                "--drafts-dir", str(tmp_path),
            ]
        )

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert output["success"] is False

    def test_unreadable_catalog_fails(self, capsys, tmp_path, draft_path):
        """Test a missing catalog file exits with 1."""
        exit_code = run(
            [
                "quote",
                "--catalog", str(tmp_path / "nope.json"),
                "--draft", str(draft_path),
            ]
        )

        assert exit_code == 1
        assert "nope.json" in json.loads(capsys.readouterr().out)["error"]
