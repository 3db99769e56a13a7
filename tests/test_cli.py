"""Tests for the command-line entry point."""

import pytest

from word_finder import matcher
from word_finder.cli import classify_arguments, main
from word_finder.config import EXIT_CLEAN, EXIT_ERROR, EXIT_FOUND, HIGHLIGHT_END, HIGHLIGHT_START


def _bold(text):
    return f"{HIGHLIGHT_START}{text}{HIGHLIGHT_END}"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Temporary working directory holding a.txt and b.txt."""
    (tmp_path / "a.txt").write_text("alpha\nBETA\n")
    (tmp_path / "b.txt").write_text("gamma alpha\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestClassifyArguments:
    """Test splitting positional arguments into paths and words."""

    def test_files_dirs_and_words(self, workdir):
        (workdir / "sub").mkdir()
        paths, targets = classify_arguments(["a.txt", "alpha", "sub", "zeta"])
        assert paths == ["a.txt", "sub"]
        assert targets == ["alpha", "zeta"]


class TestMain:
    """Test full CLI runs."""

    def test_reports_matches(self, workdir, capsys):
        """Test the basic scenario output and exit status."""
        code = main(["a.txt", "b.txt", "alpha"])

        out = capsys.readouterr().out
        assert code == EXIT_FOUND
        assert out.splitlines() == [
            f"a.txt:1 -> {_bold('alpha')}",
            f"b.txt:1 -> gamma {_bold('alpha')}",
        ]

    def test_no_matches(self, workdir, capsys):
        """Test that a clean scan exits 0 and prints nothing."""
        code = main(["a.txt", "b.txt", "zeta"])

        assert code == EXIT_CLEAN
        assert capsys.readouterr().out == ""

    def test_directory_argument(self, workdir, capsys):
        """Test that directories are scanned recursively."""
        (workdir / "sub" / "deep").mkdir(parents=True)
        (workdir / "sub" / "deep" / "c.txt").write_text("nested alpha\n")

        code = main(["sub", "alpha"])

        assert code == EXIT_FOUND
        assert "sub/deep/c.txt:1" in capsys.readouterr().out

    def test_casecheck(self, workdir, capsys):
        """Test that --casecheck turns on exact-case matching."""
        assert main(["a.txt", "beta"]) == EXIT_FOUND
        capsys.readouterr()
        assert main(["--casecheck", "a.txt", "beta"]) == EXIT_CLEAN
        assert main(["--casecheck", "a.txt", "BETA"]) == EXIT_FOUND

    def test_last_case_flag_wins(self, workdir):
        assert main(["--casecheck", "--no-casecheck", "a.txt", "beta"]) == EXIT_FOUND

    def test_escape_marker(self, workdir, capsys):
        """Test the default and a custom escape marker."""
        (workdir / "c.txt").write_text("alpha noqa:skip-line\nalpha # ok\n")

        assert main(["c.txt", "alpha"]) == EXIT_FOUND
        assert "c.txt:2" in capsys.readouterr().out

        assert main(["--escape=# ok", "c.txt", "alpha"]) == EXIT_FOUND
        out = capsys.readouterr().out
        assert "c.txt:1" in out
        assert "c.txt:2" not in out

    def test_forced_word(self, workdir, capsys):
        """Test that -w treats an existing file name as a word."""
        (workdir / "alpha").write_text("unrelated\n")

        code = main(["a.txt", "-w", "alpha"])

        assert code == EXIT_FOUND
        assert capsys.readouterr().out.startswith("a.txt:1")

    def test_forced_word_follows_positional_words(self, workdir, capsys):
        (workdir / "c.txt").write_text("alpha gamma\n")

        main(["c.txt", "-w", "gamma", "alpha"])

        lines = capsys.readouterr().out.splitlines()
        assert [line.split(" -> ")[1] for line in lines] == [
            f"{_bold('alpha')} gamma",
            f"alpha {_bold('gamma')}",
        ]

    def test_excluded_direct_file(self, workdir, capsys):
        """Test that a pre-commit config passed directly is not scanned."""
        (workdir / ".pre-commit-config.yaml").write_text("args: [alpha]\n")

        code = main([".pre-commit-config.yaml", "alpha"])

        assert code == EXIT_CLEAN
        assert capsys.readouterr().out == ""

    def test_excluded_file_found_in_directory(self, workdir, capsys):
        """Test that the same file inside a scanned directory is reported."""
        (workdir / "hooks").mkdir()
        (workdir / "hooks" / ".pre-commit-config.yaml").write_text("args: [alpha]\n")

        code = main(["hooks", "alpha"])

        assert code == EXIT_FOUND
        assert "hooks/.pre-commit-config.yaml:1" in capsys.readouterr().out

    def test_output_is_repeatable(self, workdir, capsys):
        """Test that two runs over unchanged files print identical output."""
        main([".", "alpha", "beta"])
        first = capsys.readouterr().out
        main([".", "alpha", "beta"])
        assert capsys.readouterr().out == first

    def test_paths_without_words(self, workdir, capsys):
        """Test that a run with nothing to search for is clean, not a usage error."""
        code = main(["a.txt", "b.txt"])

        captured = capsys.readouterr()
        assert code == EXIT_CLEAN
        assert captured.out == ""
        assert captured.err == ""

    def test_dash_prefixed_word(self, workdir, capsys):
        """Test that an unknown dash argument is searched for as a word."""
        (workdir / "c.txt").write_text("rm -rf build\nrm build\n")

        code = main(["c.txt", "-rf"])

        assert code == EXIT_FOUND
        assert capsys.readouterr().out.splitlines() == [f"c.txt:1 -> rm {_bold('-rf')} build"]

    def test_dash_prefixed_word_with_word_flag(self, workdir, capsys):
        """Test that --word=-WORD also searches for a dash-prefixed word."""
        (workdir / "c.txt").write_text("rm -rf build\n")

        assert main(["c.txt", "--word=-rf"]) == EXIT_FOUND
        assert "c.txt:1" in capsys.readouterr().out

    def test_only_dash_word_is_not_empty_invocation(self, workdir, capsys):
        """Test that a lone dash word is not mistaken for no arguments."""
        assert main(["--force"]) == EXIT_CLEAN
        assert capsys.readouterr().out == ""

    def test_read_failure(self, workdir, capsys, monkeypatch):
        """Test that an unreadable file aborts with status 2 and no report."""
        def denied(path):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr(matcher, "_read_lines", denied)

        code = main(["a.txt", "alpha"])

        captured = capsys.readouterr()
        assert code == EXIT_ERROR
        assert captured.out == ""
        assert "Error reading 'a.txt'" in captured.err


class TestUsageErrors:
    """Test usage errors exit with status 2 before scanning."""

    def test_no_arguments(self, capsys):
        assert main([]) == EXIT_ERROR
        assert "usage:" in capsys.readouterr().err

    def test_help(self, capsys):
        assert main(["--help"]) == EXIT_ERROR
        assert "--casecheck" in capsys.readouterr().err

    def test_trailing_forced_word_flag(self, workdir):
        """Test that -w without a value is rejected."""
        with pytest.raises(SystemExit) as exc_info:
            main(["a.txt", "alpha", "-w"])
        assert exc_info.value.code == EXIT_ERROR

    def test_empty_escape_marker(self, workdir, capsys):
        assert main(["--escape=", "a.txt", "alpha"]) == EXIT_ERROR
        assert "escape_marker" in capsys.readouterr().err

    def test_invalid_jobs(self, workdir, capsys):
        assert main(["-j", "0", "a.txt", "alpha"]) == EXIT_ERROR
        assert "max_workers" in capsys.readouterr().err
