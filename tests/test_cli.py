"""Tests for the chaptertrack command line."""

import io
import json
from unittest.mock import AsyncMock, patch

from chaptertrack.cli import main
from chaptertrack.models import Chapter, VideoInfo

DESCRIPTION = "00:00 Intro\n01:30 Topic 1\n03:45 Conclusion\n"


class TestParseCommand:
    def test_parse_file(self, tmp_path, capsys):
        path = tmp_path / "chapters.txt"
        path.write_text(DESCRIPTION, encoding="utf-8")

        assert main(["parse", str(path), "--duration", "300"]) == 0

        out = capsys.readouterr().out
        assert "1. [0:00 - 1:30] Intro" in out
        assert "3. [3:45 - 5:00] Conclusion" in out

    def test_parse_json(self, tmp_path, capsys):
        path = tmp_path / "chapters.txt"
        path.write_text(DESCRIPTION, encoding="utf-8")

        assert main(["parse", str(path), "--duration", "300", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [ch["end_time_seconds"] for ch in data] == [90, 225, 300]

    def test_parse_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("(00:00) Introduction\n"))
        assert main(["parse", "-"]) == 0
        assert "Introduction" in capsys.readouterr().out

    def test_parse_no_chapters(self, tmp_path, capsys):
        path = tmp_path / "plain.txt"
        path.write_text("no timestamps here", encoding="utf-8")
        assert main(["parse", str(path)]) == 0
        assert "No chapters found." in capsys.readouterr().out

    def test_parse_missing_file(self, tmp_path, capsys):
        assert main(["parse", str(tmp_path / "missing.txt")]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_parse_non_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"00:00 caf\xe9\n01:00 Next\n")

        assert main(["parse", str(path), "--duration", "100"]) == 1
        assert "ERROR" in capsys.readouterr().err


class TestExtractCommand:
    def _info(self):
        return VideoInfo(
            id="dQw4w9WgXcQ",
            title="Test Video",
            duration_seconds=300,
            chapters=[
                Chapter(chapter_number=1, title="Intro", start_time_seconds=0, end_time_seconds=300)
            ],
        )

    def test_extract_text(self, capsys):
        with patch("chaptertrack.cli.VideoInfoExtractor") as mock_cls:
            mock_cls.return_value.extract_info = AsyncMock(return_value=self._info())
            assert main(["extract", "https://youtu.be/dQw4w9WgXcQ"]) == 0

        out = capsys.readouterr().out
        assert "Video ID: dQw4w9WgXcQ" in out
        assert "Duration: 5:00" in out
        assert "1. [0:00 - 5:00] Intro" in out

    def test_extract_json(self, capsys):
        with patch("chaptertrack.cli.VideoInfoExtractor") as mock_cls:
            mock_cls.return_value.extract_info = AsyncMock(return_value=self._info())
            assert main(["extract", "https://youtu.be/dQw4w9WgXcQ", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["id"] == "dQw4w9WgXcQ"
        assert data["chapters"][0]["title"] == "Intro"


class TestVideoIdCommand:
    def test_video_id(self, capsys):
        assert main(["video-id", "https://youtu.be/dQw4w9WgXcQ"]) == 0
        assert capsys.readouterr().out.strip() == "dQw4w9WgXcQ"

    def test_not_youtube(self, capsys):
        assert main(["video-id", "https://example.com/v"]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out
