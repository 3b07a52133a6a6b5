import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from w3w.cli.app import app

API_KEY = "TOPSECRET"

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch):
    monkeypatch.setenv("W3W_API_KEY", API_KEY)
    monkeypatch.setenv("W3W_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("W3W_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("W3W_BASE_URL", raising=False)


@pytest.fixture
def mock_get():
    with patch("w3w.geocoding.client.requests.get") as mock:
        yield mock


def test_available_languages_plain(mock_get, make_response, languages_payload):
    mock_get.return_value = make_response(languages_payload)

    result = runner.invoke(app, ["available-languages"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "English (en),French (fr)\n"


def test_available_languages_json(mock_get, make_response, languages_payload):
    mock_get.return_value = make_response(languages_payload)

    result = runner.invoke(app, ["--output-format", "json", "available-languages"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == languages_payload


def test_output_format_from_environment(monkeypatch, mock_get, make_response, languages_payload):
    monkeypatch.setenv("W3W_OUTPUT_FORMAT", "json")
    mock_get.return_value = make_response(languages_payload)

    result = runner.invoke(app, ["available-languages"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == languages_payload


def test_to_coords_reads_stdin(mock_get, make_response, coords_payload):
    mock_get.return_value = make_response(coords_payload)

    result = runner.invoke(app, ["to-coords"], input="a.b.c\n\nd.e.f\n")

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["1.05,2.05", "1.05,2.05"]
    sent = [dict(call.kwargs["params"])["words"] for call in mock_get.call_args_list]
    assert sent == ["a.b.c", "d.e.f"]


def test_to_coords_json_output(mock_get, make_response, coords_payload):
    mock_get.return_value = make_response(coords_payload)

    result = runner.invoke(app, ["-o", "json", "to-coords", "-"], input="a.b.c\n")

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == coords_payload


def test_to_3wa_reads_file(tmp_path, mock_get, make_response, coords_payload):
    path = tmp_path / "coordinates.txt"
    path.write_text("51.520847,-0.195521\n")
    mock_get.return_value = make_response(coords_payload)

    result = runner.invoke(app, ["to-3wa", str(path), "--language", "de"])

    assert result.exit_code == 0, result.output
    assert result.stdout == "1.05,2.05\n"
    params = mock_get.call_args.kwargs["params"]
    assert ("coordinates", "51.520847,-0.195521") in params
    assert ("language", "de") in params
    assert mock_get.call_args.args[0].endswith("/convert-to-3wa")


def test_to_3wa_malformed_line_is_a_usage_error(mock_get):
    result = runner.invoke(app, ["to-3wa"], input="not coordinates\n")

    assert result.exit_code == 2
    mock_get.assert_not_called()


def test_first_failure_aborts_remaining_input(mock_get, make_response, coords_payload):
    mock_get.side_effect = [
        make_response(coords_payload),
        make_response({"error": {"code": "BadWords", "message": "Invalid 3 word address"}}, status_code=400),
        make_response(coords_payload),
    ]

    result = runner.invoke(app, ["to-coords"], input="a.b.c\nbad\ng.h.i\n")

    assert result.exit_code == 1
    assert "1.05,2.05" in result.output
    assert "Error: API returned an error: BadWords: Invalid 3 word address" in result.output
    assert mock_get.call_count == 2
    assert API_KEY not in result.output


def test_missing_api_key(monkeypatch, mock_get):
    monkeypatch.delenv("W3W_API_KEY")

    result = runner.invoke(app, ["available-languages"])

    assert result.exit_code == 2
    mock_get.assert_not_called()


def test_api_key_option_overrides_environment(mock_get, make_response, languages_payload):
    mock_get.return_value = make_response(languages_payload)

    result = runner.invoke(app, ["--api-key", "other-key", "available-languages"])

    assert result.exit_code == 0, result.output
    assert ("key", "other-key") in mock_get.call_args.kwargs["params"]


def test_invalid_base_url_exits_without_request(mock_get):
    result = runner.invoke(app, ["--base-url", "not a url", "available-languages"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    mock_get.assert_not_called()


@pytest.mark.parametrize("name, value", [("W3W_OUTPUT_FORMAT", "xml"), ("W3W_TIMEOUT", "abc")])
def test_invalid_environment_setting_is_a_usage_error(monkeypatch, mock_get, name, value):
    monkeypatch.setenv(name, value)

    result = runner.invoke(app, ["available-languages"])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
    mock_get.assert_not_called()
