"""
Unit tests for the command-line interface.
"""
import io
import sys
from pathlib import Path

import pytest

from elnet.cli import build_parser, main


@pytest.fixture
def line_file(tmp_path: Path) -> Path:
    path = tmp_path / "line.txt"
    path.write_text("0\n1\n2\n")
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_positional_arguments(self) -> None:
        args = build_parser().parse_args(
            ["10", "1.5", "2.0", "-1", "20", "-1", "coords.txt", "2"]
        )
        assert args.n_particles == 10
        assert args.cutoff == 1.5
        assert args.spring_constant == 2.0
        assert (args.lx, args.ly, args.lz) == (-1.0, 20.0, -1.0)
        assert args.file == "coords.txt"
        assert args.dim == 2

    def test_dim_defaults_to_three(self) -> None:
        args = build_parser().parse_args(["-1", "1", "1", "-1", "-1", "-1", "f"])
        assert args.dim == 3

    def test_missing_arguments(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["3", "1.5"])
        assert exc.value.code == 2


class TestMain:
    """Tests for main()."""

    def test_writes_bonds_to_stdout(self, line_file: Path, capsys) -> None:
        code = main(["3", "1.5", "10", "-1", "-1", "-1", str(line_file), "1"])
        captured = capsys.readouterr()

        assert code == 0
        assert captured.out == "1\t0\t10.000000\t1.000000\n2\t1\t10.000000\t1.000000\n"
        assert "Warning: L[0] box dimension too narrow" in captured.err
        assert "Generated 2 bonds." in captured.err

    def test_count_from_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "ring.txt"
        path.write_text("2\n-4.9\n4.9\n")
        code = main(["-1", "1.0", "1.0", "10", "-1", "-1", str(path), "1"])
        captured = capsys.readouterr()

        assert code == 0
        assert "Number of particles: 2" in captured.err
        assert captured.out == "1\t0\t1.000000\t0.200000\n"

    def test_offset(self, line_file: Path, capsys) -> None:
        main(["3", "1.5", "10", "-1", "-1", "-1", str(line_file), "1", "--offset", "5"])
        first = capsys.readouterr().out.splitlines()[0]
        assert first.startswith("6\t5\t")

    def test_output_file(self, line_file: Path, tmp_path: Path, capsys) -> None:
        out = tmp_path / "bonds.txt"
        code = main(["3", "1.5", "10", "-1", "-1", "-1", str(line_file), "1", "-o", str(out)])

        assert code == 0
        assert capsys.readouterr().out == ""
        assert len(out.read_text().splitlines()) == 2

    def test_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("0\n1\n2\n"))
        code = main(["3", "1.5", "10", "-1", "-1", "-1", "-", "1"])
        assert code == 0
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_short_file_is_fatal(self, line_file: Path, capsys) -> None:
        code = main(["5", "1.5", "10", "-1", "-1", "-1", str(line_file), "1"])
        captured = capsys.readouterr()

        assert code == 1
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_invalid_dimensionality(self, line_file: Path, capsys) -> None:
        code = main(["3", "1.5", "10", "-1", "-1", "-1", str(line_file), "4"])
        assert code == 1
        assert "dimensionality" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        code = main(["3", "1.5", "10", "-1", "-1", "-1", str(tmp_path / "nope.txt")])
        assert code == 1
        assert "Unable to open" in capsys.readouterr().err

    def test_config_file(self, line_file: Path, tmp_path: Path, capsys) -> None:
        pytest.importorskip("yaml")
        config = tmp_path / "net.yaml"
        config.write_text(
            "cutoff: 1.5\nspring_constant: 10.0\ndim: 1\n"
            f"positions: {line_file.name}\n"
        )
        code = main(["--config", str(config)])
        captured = capsys.readouterr()

        assert code == 0
        assert len(captured.out.splitlines()) == 2
        assert "Generated 2 bonds." in captured.err
