"""test_cli.py
Run tests on generate_cv_cli and publish_cv_cli.
"""
from unittest.mock import MagicMock

import generate_cv_cli
import publish_cv_cli
from cv_site.exceptions import PublishError
from cv_site.models import PublishResult
from cv_site.test_helpers.mock_cv_generator import MockCvGenerator


class TestGenerateCvCli:
    """Tests for generate_cv_cli.main."""

    def test_writes_page_to_out_file(self, tmp_path):
        cv_path = tmp_path / "cv.txt"
        cv_path.write_text(MockCvGenerator().generate(), encoding="utf-8")
        out_path = tmp_path / "cv.html"

        exit_code = generate_cv_cli.main([str(cv_path), "--out", str(out_path), "--theme-colors", "navy"])

        assert exit_code == 0
        html = out_path.read_text(encoding="utf-8")
        assert "<h1>John Doe</h1>" in html
        assert "--primary: navy;" in html

    def test_prints_page_without_out(self, tmp_path, capsys):
        cv_path = tmp_path / "cv.txt"
        cv_path.write_text(MockCvGenerator().generate(), encoding="utf-8")

        assert generate_cv_cli.main([str(cv_path), "--not-professional"]) == 0
        assert "Professional: false" in capsys.readouterr().out

    def test_insufficient_text_exits_1(self, tmp_path, capsys):
        cv_path = tmp_path / "cv.txt"
        cv_path.write_text("Jane Doe", encoding="utf-8")

        assert generate_cv_cli.main([str(cv_path)]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_inputs_exits_1(self):
        assert generate_cv_cli.main([]) == 1


class TestPublishCvCli:
    """Tests for publish_cv_cli.main."""

    def test_missing_config_exits_1(self, monkeypatch, capsys):
        for name in ["GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_REPO"]:
            monkeypatch.delenv(name, raising=False)

        assert publish_cv_cli.main(["cv.pdf"]) == 1
        assert "[CONFIG ERROR]" in capsys.readouterr().err

    def test_successful_publish(self, monkeypatch, capsys):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
        monkeypatch.setenv("GITHUB_OWNER", "jane")
        monkeypatch.setenv("GITHUB_REPO", "cv")

        publisher = MagicMock()
        publisher.publish.return_value = PublishResult(
            path="generated/cv.html",
            html_url=None,
            raw_url="https://raw.githubusercontent.com/jane/cv/main/generated/cv.html",
            created=False,
        )
        publisher_class = MagicMock(return_value=publisher)
        monkeypatch.setattr(publish_cv_cli, "CvPublisher", publisher_class)

        assert publish_cv_cli.main(["cv.pdf", "--theme-type", "classic"]) == 0

        theme = publisher.publish.call_args[0][1]
        assert theme.theme_type == "classic"
        out = capsys.readouterr().out
        assert "Action: updated" in out
        assert "raw.githubusercontent.com/jane/cv/main/generated/cv.html" in out

    def test_publish_error_exits_1(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_test")
        monkeypatch.setenv("GITHUB_OWNER", "jane")
        monkeypatch.setenv("GITHUB_REPO", "cv")

        publisher = MagicMock()
        publisher.publish.side_effect = PublishError("Upload failed", status_code=500)
        monkeypatch.setattr(publish_cv_cli, "CvPublisher", MagicMock(return_value=publisher))

        assert publish_cv_cli.main(["cv.pdf"]) == 1
