from unittest.mock import MagicMock

import pytest

import cli
from src.fetcher.errors import MalformedResponseError, PokemonFetchError


def install_fetcher(monkeypatch, fetcher):
    """Route cli.get_fetcher to *fetcher* and record the call."""
    factory = MagicMock(return_value=fetcher)
    fetcher.__enter__.return_value = fetcher
    fetcher.__exit__.return_value = False
    monkeypatch.setattr(cli, "get_fetcher", factory)
    return factory


def test_summarize_prints_each_name(monkeypatch, capsys):
    fetcher = MagicMock()
    fetcher.fetch_and_print.side_effect = lambda name: print(f"{name.title()} summary")
    install_fetcher(monkeypatch, fetcher)

    exit_code = cli.main(["summarize", "pikachu", "bulbasaur"])

    assert exit_code == 0
    assert capsys.readouterr().out == "Pikachu summary\nBulbasaur summary\n"
    fetcher.__exit__.assert_called_once()


def test_backend_and_config_flags_reach_factory(monkeypatch):
    fetcher = MagicMock()
    factory = install_fetcher(monkeypatch, fetcher)

    cli.main(["--backend", "graphql", "--endpoint", "http://mirror.test/gql", "--timeout", "4", "summarize", "mew"])

    args, kwargs = factory.call_args
    assert args == ("graphql",)
    assert kwargs["config"].endpoint == "http://mirror.test/gql"
    assert kwargs["config"].timeout == 4.0


def test_summarize_failure_goes_to_stderr_and_exit_code(monkeypatch, capsys):
    fetcher = MagicMock()

    def fake_print(name):
        if name == "missingno":
            raise PokemonFetchError("HTTP 404 from https://pokeapi.co/api/v2/pokemon/missingno", status_code=404)
        print("Pikachu (#25) has 35 HP.")

    fetcher.fetch_and_print.side_effect = fake_print
    install_fetcher(monkeypatch, fetcher)

    exit_code = cli.main(["summarize", "missingno", "pikachu"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == "Pikachu (#25) has 35 HP.\n"
    assert "error: missingno: HTTP 404" in captured.err


def test_summarize_reports_malformed_response(monkeypatch, capsys):
    fetcher = MagicMock()
    fetcher.fetch_and_print.side_effect = MalformedResponseError("Response is not valid JSON")
    install_fetcher(monkeypatch, fetcher)

    assert cli.main(["summarize", "pikachu"]) == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_raw_prints_payload(monkeypatch, capsys):
    fetcher = MagicMock()
    fetcher.fetch_raw.return_value = '{"id": 25}'
    install_fetcher(monkeypatch, fetcher)

    assert cli.main(["raw", "pikachu"]) == 0
    assert capsys.readouterr().out == '{"id": 25}\n'
    fetcher.fetch_raw.assert_called_once_with("pikachu")


def test_raw_failure_prints_nothing_to_stdout(monkeypatch, capsys):
    fetcher = MagicMock()
    fetcher.fetch_raw.side_effect = PokemonFetchError("Request to https://pokeapi.co failed")
    install_fetcher(monkeypatch, fetcher)

    assert cli.main(["raw", "missingno"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: missingno" in captured.err


def test_unknown_backend_is_rejected_by_parser():
    with pytest.raises(SystemExit):
        cli.main(["--backend", "soap", "summarize", "pikachu"])
