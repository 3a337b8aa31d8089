"""Tests for the set indexing job."""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx

from cardindex.jobs.index_sets import load_collection, main, resolve_sources, run


@pytest.fixture
def set_dir(tmp_path: Path, black_serpent_xml: str) -> Path:
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "set.xml").write_text(black_serpent_xml, encoding="utf-8")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "set.xml").write_text(black_serpent_xml, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a set", encoding="utf-8")
    return tmp_path


class TestResolveSources:
    def test_expands_directories(self, set_dir: Path) -> None:
        sources = resolve_sources([str(set_dir)])
        assert sources == [str(set_dir / "a" / "set.xml"), str(set_dir / "b" / "set.xml")]

    def test_keeps_files_and_urls(self) -> None:
        sources = resolve_sources(["one.xml", "https://example.com/set.xml"])
        assert sources == ["one.xml", "https://example.com/set.xml"]

    def test_defaults_to_data_dir(self, set_dir: Path) -> None:
        with patch("cardindex.jobs.index_sets.settings") as mock_settings:
            mock_settings.data_dir = set_dir
            assert len(resolve_sources([])) == 2


class TestLoadCollection:
    def test_concatenates_in_order(self, set_dir: Path) -> None:
        collection = load_collection(resolve_sources([str(set_dir)]))

        assert len(collection) == 6
        assert [card.name for card in collection][3:] == [
            "Fastred",
            "Fearless Scout",
            "Rally the West",
        ]

    @respx.mock
    def test_loads_urls(self, black_serpent_xml: str) -> None:
        respx.get("https://example.com/set.xml").mock(
            return_value=httpx.Response(200, text=black_serpent_xml)
        )

        collection = load_collection(["https://example.com/set.xml"])

        assert len(collection) == 3


class TestRun:
    def test_prefix_and_type_filters(
        self, set_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run([str(set_dir)], prefix="f", type_name="Attachment") == 0

        lines = capsys.readouterr().out.splitlines()
        assert [line.split("\t")[0] for line in lines] == ["1", "4"]
        assert all(line.endswith("Fearless Scout") for line in lines)

    def test_heroes_report(self, set_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run([str(set_dir / "a")], heroes=True) == 0

        out = capsys.readouterr().out
        assert "Fastred\tSpirit\t1/2/3/3" in out

    def test_unknown_type_name(self, set_dir: Path) -> None:
        assert run([str(set_dir)], type_name="Boon") == 2

    def test_decode_error_exit_code(self, tmp_path: Path) -> None:
        broken = tmp_path / "broken.xml"
        broken.write_text("<set>", encoding="utf-8")

        assert run([str(broken)]) == 1

    def test_missing_file_exit_code(self, tmp_path: Path) -> None:
        assert run([str(tmp_path / "missing.xml")]) == 1


class TestMain:
    def test_parses_arguments(self, set_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(set_dir / "a"), "--prefix", "wes"]) == 0

        out = capsys.readouterr().out
        assert out.strip().endswith("Rally the West")
