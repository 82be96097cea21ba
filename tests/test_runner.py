"""
Tests for the command-line runner.
"""

import pytest

from radiation_pattern import config
from radiation_pattern.core import load_dose_map
from radiation_pattern.runner import build_config, main, parse_float, parse_int, split_arguments


class TestNumberParsing:
    """C-style numeric parsing"""

    @pytest.mark.parametrize("text, expected", [
        ("100", 100.0),
        ("0.01", 0.01),
        (" -2e3", -2000.0),
        ("1.5cm", 1.5),
        (".5", 0.5),
        ("abc", 0.0),
        ("", 0.0),
    ])
    def test_parse_float(self, text, expected):
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text, expected", [
        ("50", 50),
        ("20px", 20),
        ("-3", -3),
        ("x", 0),
    ])
    def test_parse_int(self, text, expected):
        assert parse_int(text) == expected


class TestBuildConfig:
    """Positional values to SimulationConfig"""

    def test_defaults(self):
        sim_config = build_config(["100", "0.01", "1", "G"])
        assert sim_config.start_height == 100.0
        assert sim_config.dt == 0.01
        assert sim_config.end_time == 1.0
        assert sim_config.beam_type == "g"
        assert sim_config.grid_radius == config.GRID_RADIUS_CM
        assert sim_config.beam_radius == config.BEAM_RADIUS_CM
        assert sim_config.intensity == config.BEAM_INTENSITY_W_CM2
        assert sim_config.resolution == config.GRID_RESOLUTION

    def test_optional_values(self):
        sim_config = build_config(["10", "0.1", "2", "c", "0.3", "0.5", "4", "20"])
        assert sim_config.grid_radius == 0.3
        assert sim_config.beam_radius == 0.5
        assert sim_config.intensity == 4.0
        assert sim_config.resolution == 20

    def test_too_few_values(self):
        with pytest.raises(ValueError):
            build_config(["10", "0.1", "2"])


class TestSplitArguments:
    """Separating positionals from options"""

    def test_negative_reals_stay_positional(self):
        values, options = split_arguments(["-1e3", "-1.5e2", "-inf", "c", "--quiet"])
        assert values == ["-1e3", "-1.5e2", "-inf", "c"]
        assert options == ["--quiet"]

    def test_options_between_positionals(self):
        values, options = split_arguments(["100", "0.01", "--workers", "2", "1", "--quiet", "c"])
        assert values == ["100", "0.01", "1", "c"]
        assert options == ["--workers=2", "--quiet"]

    def test_negative_option_value(self):
        values, options = split_arguments(["1", "--intensity-ramp", "-1e-3", "0.25"])
        assert values == ["1", "0.25"]
        assert options == ["--intensity-ramp=-1e-3"]

    def test_double_dash_ends_options(self):
        values, options = split_arguments(["--quiet", "--", "--plot", "x"])
        assert values == ["--plot", "x"]
        assert options == ["--quiet"]


class TestMain:
    """Exit codes and output"""

    def test_usage(self, capsys):
        assert main(["100", "0.01", "1"]) == 1
        out = capsys.readouterr().out
        assert "Supply at least 4 parameters" in out
        assert "beam type (c = circular, g = gaussian)" in out

    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "Supply at least 4 parameters" in capsys.readouterr().out

    def test_unknown_beam_type(self, capsys):
        assert main(["100", "0.01", "1", "x"]) == 1
        assert "Beam type must be c/g" in capsys.readouterr().out

    def test_dump_to_stdout(self, capsys):
        assert main(["100", "0.25", "1", "c", "0.15", "1", "2", "5", "--quiet"]) == 0
        out = capsys.readouterr().out
        assert out.endswith("\n\n")
        lines = out.split("\n")[:-2]
        assert len(lines) == 25
        assert all(len(line.split()) == 3 for line in lines)
        assert lines[0].split()[:2] == ["-0.15", "-0.15"]
        assert lines[1].split()[:2] == ["-0.15", "-0.09"]
        assert lines[5].split()[:2] == ["-0.09", "-0.15"]

    def test_diagnostics_go_to_stderr(self, capsys):
        assert main(["1", "0.25", "1", "g", "0.15", "1", "2", "4"]) == 0
        captured = capsys.readouterr()
        assert len(captured.out.split("\n")[:-2]) == 16
        assert "DOSE SIMULATION STATISTICS" in captured.err
        assert "[info]" in captured.err

    def test_zero_resolution(self, capsys):
        assert main(["100", "0.25", "1", "c", "0.15", "1", "2", "0", "--quiet"]) == 0
        assert capsys.readouterr().out == "\n"

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "out" / "dose.txt"
        assert main(["1", "0.25", "1", "g", "0.15", "1", "2", "6", "--quiet",
                     "--output", str(target), "--workers", "2"]) == 0
        assert capsys.readouterr().out == ""
        data = load_dose_map(target)
        assert data.shape == (36, 3)

    def test_vectorized_flag(self, capsys):
        assert main(["1", "0.25", "1", "g", "0.15", "1", "2", "4", "--quiet", "--vectorized"]) == 0
        vectorized = capsys.readouterr().out
        assert main(["1", "0.25", "1", "g", "0.15", "1", "2", "4", "--quiet", "--workers", "0"]) == 0
        sequential = capsys.readouterr().out
        assert len(vectorized.split("\n")) == len(sequential.split("\n"))

    @pytest.mark.parametrize("height", ["-5", "-1e3", "-1.5e2", "-inf"])
    def test_negative_start_height(self, height, capsys):
        assert main([height, "0.25", "1", "c", "0.15", "1", "2", "2", "--quiet", "--workers", "0"]) == 0
        out = capsys.readouterr().out
        lines = out.split("\n")[:-2]
        assert len(lines) == 4
        assert all(line.split()[2] == "0" for line in lines)

    def test_options_between_positionals(self, capsys):
        assert main(["1", "0.25", "--quiet", "1", "g", "--workers", "0", "0.15", "1", "2", "3"]) == 0
        between = capsys.readouterr()
        assert main(["1", "0.25", "1", "g", "0.15", "1", "2", "3", "--quiet", "--workers", "0"]) == 0
        trailing = capsys.readouterr()
        assert between.err == ""
        assert between.out == trailing.out
        assert len(between.out.split("\n")[:-2]) == 9

    def test_unknown_option(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["100", "0.01", "1", "c", "--bogus"])
        assert excinfo.value.code == 2
