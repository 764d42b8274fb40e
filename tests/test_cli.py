import json

import pytest
from click.testing import CliRunner

from emitscope.cli import cli


@pytest.fixture
def runner():
    # wide console so rich tables do not wrap signatures
    return CliRunner(env={"COLUMNS": "200"})


@pytest.fixture
def project(tmp_path, counter_abi, counter_source):
    abi = tmp_path / "Counter.json"
    abi.write_text(json.dumps({"abi": counter_abi}))
    source = tmp_path / "Counter.sol"
    source.write_text(counter_source)
    return abi, source


def test_categorize(runner, project):
    abi, _ = project

    result = runner.invoke(cli, ["categorize", str(abi)])

    assert result.exit_code == 0, result.output
    assert "increment()" in result.output
    assert "getCount()" in result.output
    assert "Incremented(uint256)" in result.output


def test_correlate_marks_unknown_functions(runner, project, tmp_path):
    abi, _ = project
    source = tmp_path / "Other.sol"
    source.write_text("contract Other { function increment() public { emit Incremented(1); } }")

    result = runner.invoke(cli, ["correlate", str(source), str(abi)])

    assert result.exit_code == 0, result.output
    assert "Incremented" in result.output
    # setNumber has no body here and no similarly named event
    assert "unknown" in result.output


def test_queries_with_dataset(runner, project):
    abi, _ = project

    result = runner.invoke(cli, ["queries", str(abi), "--dataset", "ns/name@dev", "--limit", "5"])

    assert result.exit_code == 0, result.output
    assert "Event counts by type" in result.output
    assert "value_returned" in result.output
    assert "LIMIT 5" in result.output


def test_queries_dataset_from_source(runner, project):
    abi, source = project

    result = runner.invoke(cli, ["queries", str(abi), "--source", str(source), "--kind", "explorer"])

    assert result.exit_code == 0, result.output
    assert "eth_global/counter_" in result.output
    assert "Event timeline" in result.output


def test_queries_requires_dataset_or_source(runner, project):
    abi, _ = project

    result = runner.invoke(cli, ["queries", str(abi)])

    assert result.exit_code == 2
    assert "--dataset or --source" in result.output


def test_queries_rejects_bad_address(runner, project):
    abi, _ = project

    result = runner.invoke(cli, ["queries", str(abi), "--dataset", "d", "--address", "0x12"])

    assert result.exit_code == 2
    assert "not an address" in result.output


def test_binary_source_is_reported(runner, project, tmp_path):
    abi, _ = project
    source = tmp_path / "Binary.sol"
    source.write_bytes(b"\xff\xfe contract X {}")

    result = runner.invoke(cli, ["correlate", str(source), str(abi)])

    assert result.exit_code == 1
    assert "not a UTF-8 text file" in result.output

    result = runner.invoke(cli, ["queries", str(abi), "--source", str(source)])

    assert result.exit_code == 1
    assert "not a UTF-8 text file" in result.output


def test_binary_abi_is_reported(runner, tmp_path):
    abi = tmp_path / "Counter.json"
    abi.write_bytes(b"\xff\xfe\x00[")

    result = runner.invoke(cli, ["categorize", str(abi)])

    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_malformed_abi_is_reported(runner, tmp_path):
    abi = tmp_path / "bad.json"
    abi.write_text('{"contracts": {}}')

    result = runner.invoke(cli, ["categorize", str(abi)])

    assert result.exit_code == 1
    assert "Unrecognized ABI format" in result.output
