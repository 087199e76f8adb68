"""
Unit tests for the command line interface.
"""

import json

import pytest

from mushaf.cli import EXIT_ERROR, EXIT_INVALID_ARGUMENT, EXIT_OK, main
from mushaf.data import write_document


@pytest.fixture
def run(corpus_file, capsys):
    """Run the CLI against the fixture corpus and return (exit code, stdout, stderr)."""

    def _run(*argv):
        code = main(["--data", str(corpus_file), *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


class TestQueries:
    """Test the query subcommands."""

    def test_verse(self, run):
        code, out, _ = run("verse", "2", "255")
        data = json.loads(out)

        assert code == EXIT_OK
        assert data["juz"] == 3
        assert data["hizb"] == 5
        assert data["surah"]["englishName"] == "Al-Baqara"

    def test_chapter(self, run):
        code, out, _ = run("chapter", "1")

        assert code == EXIT_OK
        assert len(json.loads(out)["ayat"]) == 7

    def test_chapter_without_verses(self, run):
        _, out, _ = run("chapter", "2", "--no-verses")
        data = json.loads(out)

        assert data["ayat"] == []
        assert data["numberOfAyahs"] == 286

    def test_range(self, run):
        _, out, _ = run("range", "1", "1", "7")
        assert json.loads(out)["range"] == {"start": 1, "end": 7, "count": 7}

    def test_juz_and_hizb(self, run):
        _, out, _ = run("juz", "30")
        assert json.loads(out)["juz"] == 30

        _, out, _ = run("hizb", "1")
        assert json.loads(out)["totalAyat"] == 81

    def test_search_with_limit(self, run):
        code, out, _ = run("search", "[2:25", "--limit", "3")
        data = json.loads(out)

        assert code == EXIT_OK
        assert data["totalResults"] == 11
        assert len(data["results"]) == 3

    def test_chapters(self, run):
        _, out, _ = run("chapters", "kahf")
        assert [c["id"] for c in json.loads(out)["results"]] == [18]

    def test_list(self, run):
        _, out, _ = run("list")
        data = json.loads(out)

        assert len(data) == 114
        assert all(c["ayat"] == [] for c in data)

    def test_random(self, run):
        _, out, _ = run("random")
        assert json.loads(out)["id"] >= 1

    def test_prostration(self, run):
        _, out, _ = run("prostration")
        assert json.loads(out)["totalSajdahAyat"] == 15

    def test_stats(self, run):
        _, out, _ = run("stats")
        data = json.loads(out)

        assert data["totalAyat"] == 6236
        assert data["shortestSurah"]["id"] == 103


class TestErrors:
    """Test exit codes on failure."""

    @pytest.mark.parametrize("argv", [
        ("verse", "1", "8"),
        ("chapter", "115"),
        ("range", "1", "5", "3"),
        ("juz", "31"),
        ("hizb", "0"),
        ("search", "  "),
        ("search", "x", "--limit", "-1"),
        ("chapters", ""),
    ])
    def test_invalid_argument(self, run, argv):
        code, out, err = run(*argv)

        assert code == EXIT_INVALID_ARGUMENT
        assert out == ""
        assert err.startswith("error: ")

    def test_missing_corpus(self, tmp_path, capsys):
        code = main(["--data", str(tmp_path / "missing.json"), "verse", "1", "1"])

        assert code == EXIT_ERROR
        assert "not found" in capsys.readouterr().err

    def test_non_integer_argument_is_usage_error(self, run):
        with pytest.raises(SystemExit) as exc_info:
            run("verse", "one", "1")
        assert exc_info.value.code == 2


class TestValidate:
    """Test the validate subcommand."""

    def test_valid_document(self, corpus_file, capsys):
        code = main(["validate", str(corpus_file)])
        data = json.loads(capsys.readouterr().out)

        assert code == EXIT_OK
        assert data == {"path": str(corpus_file), "valid": True, "chapters": 114, "verses": 6236}

    def test_uses_data_option(self, run):
        code, out, _ = run("validate")
        assert code == EXIT_OK
        assert json.loads(out)["valid"] is True

    def test_invalid_document(self, corpus_document, tmp_path, capsys):
        corpus_document["surahs"][0]["ayat"][0]["sajdah"] = True
        path = write_document(corpus_document, tmp_path / "quran.json")

        code = main(["validate", str(path)])
        data = json.loads(capsys.readouterr().out)

        assert code == EXIT_ERROR
        assert data["valid"] is False
        assert data["invariant"] == "prostration_count"


class TestBuildCorpus:
    """Test the build-corpus subcommand."""

    def test_build(self, corpus_texts, tmp_path, capsys):
        source = tmp_path / "quran-simple.txt"
        source.write_text(
            "\n".join(f"{c}|{v}|{t}" for (c, v), t in sorted(corpus_texts.items())),
            encoding="utf-8",
        )
        output = tmp_path / "quran.json"

        code = main(["build-corpus", str(source), "-o", str(output), "--version", "1.2"])
        data = json.loads(capsys.readouterr().out)

        assert code == EXIT_OK
        assert data == {"output": str(output), "version": "1.2", "chapters": 114, "verses": 6236}
        assert main(["validate", str(output)]) == EXIT_OK

    def test_build_from_bad_source(self, tmp_path, capsys):
        source = tmp_path / "bad.txt"
        source.write_text("1|1\n", encoding="utf-8")

        code = main(["build-corpus", str(source), "-o", str(tmp_path / "quran.json")])

        assert code == EXIT_ERROR
        assert "sura|aya|text" in capsys.readouterr().err
