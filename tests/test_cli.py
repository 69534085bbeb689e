"""Tests for the CLI module."""

import json
from unittest.mock import MagicMock, patch

import pytest

from blog_renderer.cli import main
from blog_renderer.config import PASSWORD_ENV_VAR


@pytest.fixture(autouse=True)
def no_password_env(monkeypatch):
    monkeypatch.delenv(PASSWORD_ENV_VAR, raising=False)


class TestCLIMain:
    """Tests for top-level argument handling."""

    def test_no_command_prints_help(self, capsys):
        """Without a command the help is shown."""
        result = main([])

        assert result == 0
        assert "render" in capsys.readouterr().out

    def test_rejects_unknown_source(self):
        """Unknown sources are rejected by argparse."""
        with pytest.raises(SystemExit):
            main(["render", "--source", "xml", "--locator", "blog.xml"])


class TestCLIRender:
    """Tests for the render command."""

    def test_render_list_from_json(self, json_source, capsys):
        """render prints the list page."""
        result = main(["render", "--source", "json", "--locator", str(json_source)])

        out = capsys.readouterr().out
        assert result == 0
        assert out.startswith("<!doctype html>")
        assert '<a href="?articleId=1">Hello</a>' in out

    def test_render_article_from_csv(self, csv_source, capsys):
        """render --article-id prints the article page."""
        result = main([
            "render",
            "--source", "csv",
            "--locator", str(csv_source),
            "--article-id", "2",
        ])

        out = capsys.readouterr().out
        assert result == 0
        assert "<h2>Second post</h2>" in out
        assert "by A.martin, on 15-02-2020" in out

    def test_render_from_database(self, sqlite_source, capsys):
        """render reads from a database with the given driver."""
        result = main([
            "render",
            "--source", "database",
            "--db-driver", "sqlite",
            "--locator", str(sqlite_source),
            "--article-id", "1",
        ])

        assert result == 0
        assert "<h2>Hello</h2>" in capsys.readouterr().out

    def test_render_to_output_file(self, json_source, tmp_path):
        """render --output writes the page to a file."""
        output = tmp_path / "site" / "index.html"

        result = main([
            "render",
            "--locator", str(json_source),
            "--title", "My blog",
            "--output", str(output),
        ])

        assert result == 0
        html = output.read_text(encoding="utf-8")
        assert "<title>My blog</title>" in html

    def test_render_unknown_article(self, json_source, capsys, caplog):
        """An unknown article id still renders the page but fails."""
        result = main(["render", "--locator", str(json_source), "--article-id", "42"])

        assert result == 1
        assert "Article 42 not found." in capsys.readouterr().out
        assert "Article 42 not found" in caplog.text

    def test_render_missing_file(self, tmp_path, caplog):
        """A missing data file fails with a logged error."""
        result = main(["render", "--locator", str(tmp_path / "missing.json")])

        assert result == 1
        assert "Failed to load articles" in caplog.text

    def test_render_requires_locator(self, caplog):
        """A locator must come from the flags or the config file."""
        result = main(["render"])

        assert result == 1
        assert "No data source locator given" in caplog.text

    def test_render_with_config_file(self, json_source, tmp_path, capsys):
        """Settings are read from --config."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({
            "title": "From config",
            "language": "en",
            "source": "json",
            "locator": str(json_source),
        }))

        result = main(["render", "--config", str(config_path)])

        out = capsys.readouterr().out
        assert result == 0
        assert "<h1>From config</h1>" in out
        assert '<html lang="en">' in out

    def test_flags_override_config_file(self, json_source, csv_source, tmp_path, capsys):
        """Command-line flags take precedence over the config file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"source": "json", "locator": str(json_source)}))

        result = main([
            "render",
            "--config", str(config_path),
            "--source", "csv",
            "--locator", str(csv_source),
        ])

        assert result == 0
        assert "Third, with a comma" in capsys.readouterr().out

    def test_render_invalid_config(self, tmp_path, caplog):
        """An invalid config file fails with a logged error."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json")

        result = main(["render", "--config", str(config_path)])

        assert result == 1
        assert "Invalid configuration" in caplog.text

    def test_render_config_not_utf8(self, json_source, tmp_path, caplog):
        """A config file that is not UTF-8 fails with a logged error."""
        config_path = tmp_path / "config.json"
        config_path.write_bytes(b"\xff\xfe\x00bad")

        result = main(["render", "--config", str(config_path), "--locator", str(json_source)])

        assert result == 1
        assert "Invalid configuration" in caplog.text

    def test_strict_authors(self, tmp_path, sample_document, caplog):
        """--strict-authors fails on unknown author references."""
        sample_document["articles"][0]["authorId"] = 99
        path = tmp_path / "blog.json"
        path.write_text(json.dumps(sample_document))

        result = main(["render", "--locator", str(path), "--strict-authors"])

        assert result == 1
        assert "unknown author 99" in caplog.text


class TestCLIServe:
    """Tests for the serve command."""

    @patch("blog_renderer.cli.make_server")
    def test_serve_starts_server(self, mock_make_server, json_source):
        """serve builds the app and serves it on the given address."""
        mock_server = MagicMock()
        mock_make_server.return_value.__enter__.return_value = mock_server

        result = main([
            "serve",
            "--locator", str(json_source),
            "--host", "0.0.0.0",
            "--port", "8080",
        ])

        assert result == 0
        host, port, app = mock_make_server.call_args.args
        assert (host, port) == ("0.0.0.0", 8080)
        assert callable(app)
        mock_server.serve_forever.assert_called_once()

    @patch("blog_renderer.cli.make_server")
    def test_serve_stops_on_interrupt(self, mock_make_server, json_source):
        """Ctrl-C stops the server cleanly."""
        mock_server = MagicMock()
        mock_server.serve_forever.side_effect = KeyboardInterrupt
        mock_make_server.return_value.__enter__.return_value = mock_server

        result = main(["serve", "--locator", str(json_source)])

        assert result == 0

    @patch("blog_renderer.cli.make_server")
    def test_serve_load_failure(self, mock_make_server, tmp_path):
        """serve does not start when loading fails."""
        result = main(["serve", "--locator", str(tmp_path / "missing.json")])

        assert result == 1
        mock_make_server.assert_not_called()
