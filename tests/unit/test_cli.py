"""Unit tests for the lookup CLI: dogbreeds.cli.lookup."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest

from dogbreeds.cli.lookup import _build_parser, main, run_lookups
from dogbreeds.providers.cache.caching_breed_provider import CachingBreedProvider
from dogbreeds.utils.errors import BreedNotFoundError
from tests.conftest import StubBreedProvider


class TestParser:
    def test_defaults(self) -> None:
        args = _build_parser().parse_args(["hound"])
        assert args.breeds == ["hound"]
        assert args.repeat == 1
        assert args.json is False
        assert args.log_level is None

    def test_multiple_breeds_and_repeat(self) -> None:
        args = _build_parser().parse_args(["hound", "terrier", "--repeat", "3", "--json"])
        assert args.breeds == ["hound", "terrier"]
        assert args.repeat == 3
        assert args.json is True

    def test_repeat_must_be_positive(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _build_parser().parse_args(["hound", "--repeat", "0"])
        assert exc_info.value.code == 2

    def test_breed_required(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args([])


class TestRunLookups:
    @pytest.mark.asyncio
    async def test_prints_results_and_uses_cache(
        self, stub_provider: StubBreedProvider, capsys: pytest.CaptureFixture[str]
    ) -> None:
        provider = CachingBreedProvider(stub_provider)

        exit_code = await run_lookups(provider, ["hound", "pug"], repeat=2)

        assert exit_code == 0
        assert provider.calls_made == 2
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "hound: afghan, basset, blood",
            "pug: (none)",
            "hound: afghan, basset, blood",
            "pug: (none)",
        ]

    @pytest.mark.asyncio
    async def test_failure_reported_on_stderr(
        self, stub_provider: StubBreedProvider, capsys: pytest.CaptureFixture[str]
    ) -> None:
        provider = CachingBreedProvider(stub_provider)

        exit_code = await run_lookups(provider, ["bogus", "terrier"], repeat=2)

        assert exit_code == 1
        assert provider.calls_made == 3
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "terrier: affenpinscher-sub, x",
            "terrier: affenpinscher-sub, x",
        ]
        assert captured.err.count("error: [stub] Unknown breed 'bogus'") == 2

    @pytest.mark.asyncio
    async def test_json_output(
        self, stub_provider: StubBreedProvider, capsys: pytest.CaptureFixture[str]
    ) -> None:
        await run_lookups(stub_provider, ["terrier"], as_json=True)

        line = capsys.readouterr().out.strip()
        assert json.loads(line) == {"breed": "terrier", "sub_breeds": ["affenpinscher-sub", "x"]}


class TestMain:
    def test_main_exits_with_lookup_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        provider = CachingBreedProvider(StubBreedProvider({"hound": [["afghan"]]}))

        with (
            patch("dogbreeds.main.build_breed_provider", return_value=provider),
            patch("dogbreeds.utils.logging.configure_logging"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["hound", "--repeat", "2"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["hound: afghan", "hound: afghan", "Calls made: 1"]

    def test_main_exits_nonzero_on_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        failing = AsyncMock(side_effect=BreedNotFoundError("API error", breed="bogus"))
        provider = CachingBreedProvider(StubBreedProvider())
        provider._wrapped.lookup_sub_breeds = failing

        with (
            patch("dogbreeds.main.build_breed_provider", return_value=provider),
            patch("dogbreeds.utils.logging.configure_logging"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main(["bogus"])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "error: API error" in captured.err
        assert "Calls made: 1" in captured.out

    def test_main_passes_app_env_to_logging(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        provider = CachingBreedProvider(StubBreedProvider({"hound": [["afghan"]]}))

        with (
            patch("dogbreeds.main.build_breed_provider", return_value=provider),
            patch("dogbreeds.utils.logging.configure_logging") as mock_configure,
        ):
            with pytest.raises(SystemExit):
                main(["hound"])

        mock_configure.assert_called_once_with("WARNING", app_env="production")
