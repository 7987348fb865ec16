import json
from pathlib import Path

import pytest
import yaml

from ridematch import cli

SCENARIO = """
seed: 3
metric: euclidean
drivers:
  - {id: d0, lat: 0, lng: 0}
  - {id: d1, lat: 10, lng: 10}
passengers:
  - {id: p0, lat: 10, lng: 9}
  - {id: p1, lat: 0, lng: 1}
"""


def extract_json_from_stdout(output: str) -> str:
    """Extract the JSON block from stdout that also carries status lines."""
    json_start = output.find("{")
    if json_start == -1:
        return output

    brace_count = 0
    for i in range(json_start, len(output)):
        if output[i] == "{":
            brace_count += 1
        elif output[i] == "}":
            brace_count -= 1
            if brace_count == 0:
                return output[json_start : i + 1]
    return output


@pytest.fixture
def scenario_file(tmp_path: Path) -> Path:
    path = tmp_path / "city.yaml"
    path.write_text(SCENARIO)
    return path


def test_cli_run_file(scenario_file: Path, tmp_path: Path) -> None:
    out_file = tmp_path / "res.json"
    cli.main(["run", str(scenario_file), "--results", str(out_file)])
    assert out_file.is_file()
    data = json.loads(out_file.read_text())
    assert data["total_assigned_cost"] == pytest.approx(4.0)
    assert [a["source_id"] for a in data["assignments"]] == ["d0", "d1"]


def test_cli_run_default_results_path(scenario_file: Path, tmp_path: Path, monkeypatch) -> None:
    """Without --results the report is written to the working directory."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    cli.main(["run", str(scenario_file)])
    assert (workdir / "city.results.json").exists()


def test_cli_inspect_rejects_shared_ids(tmp_path: Path, capsys) -> None:
    """inspect and run agree on which documents are valid."""
    path = tmp_path / "shared.yaml"
    path.write_text(
        "drivers: [{id: a, lat: 0, lng: 0}]\npassengers: [{id: a, lat: 1, lng: 1}]\n"
    )
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "used by both" in out
    assert "Scenario is valid" not in out


def test_cli_run_stdout(scenario_file: Path, tmp_path: Path, capsys, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    cli.main(["run", str(scenario_file), "--stdout", "--no-results"])
    captured = capsys.readouterr()
    data = json.loads(extract_json_from_stdout(captured.out))
    assert data["metric"] == "euclidean"
    assert "Optimal total: 4" in captured.out
    assert not (tmp_path / "city.results.json").exists()


def test_cli_run_missing_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(tmp_path / "missing.yaml"), "--no-results"])
    assert exc_info.value.code == 1
    assert "Scenario file not found" in capsys.readouterr().out


def test_cli_run_invalid_scenario(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("metric: manhattan\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(path), "--no-results"])
    assert exc_info.value.code == 1
    assert "ValidationError" in capsys.readouterr().out


def test_cli_inspect(scenario_file: Path, capsys) -> None:
    cli.main(["inspect", str(scenario_file), "--detail"])
    out = capsys.readouterr().out
    assert "Scenario is valid" in out
    assert "Drivers: 2" in out
    assert "passenger | p1" in out


def test_cli_generate_then_run(tmp_path: Path) -> None:
    """A generated scenario file is accepted by run."""
    scenario_path = tmp_path / "gen.yaml"
    cli.main(
        [
            "generate",
            "--drivers",
            "4",
            "--passengers",
            "6",
            "--seed",
            "5",
            "-o",
            str(scenario_path),
        ]
    )
    data = yaml.safe_load(scenario_path.read_text())
    assert len(data["drivers"]) == 4
    assert len(data["passengers"]) == 6
    assert data["seed"] == 5

    out_file = tmp_path / "gen.results.json"
    cli.main(["run", str(scenario_path), "--results", str(out_file)])
    results = json.loads(out_file.read_text())
    assert len(results["assignments"]) == 4
    assert results["metric"] == "haversine"


def test_cli_generate_stdout(capsys) -> None:
    cli.main(["generate", "--drivers", "1", "--passengers", "1", "--seed", "1"])
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["drivers"][0]["id"] == "driver-0"


def test_cli_generate_negative_count() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["generate", "--drivers", "-1"])
    assert exc_info.value.code == 2


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: ridematch" in capsys.readouterr().out


def test_format_cost() -> None:
    assert cli._format_cost(0.1) == "0.1"
    assert cli._format_cost(10.0) == "10"
    assert cli._format_cost(1234.567) == "1,234.567"
    assert cli._format_cost("n/a") == "n/a"


def test_format_duration() -> None:
    assert cli._format_duration(0.123) == "123.0 ms"
    assert cli._format_duration(1.234) == "1.23 s"
    assert cli._format_duration(75.2) == "1m 15.2s"
