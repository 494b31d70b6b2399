"""Tests for the azconfig command line entry point."""

from __future__ import annotations

import sys
from typing import Callable, List

import pytest

from azconfig.cli.credentials import main
from azconfig.models.settings import AzConfigSettings


def _run(monkeypatch: pytest.MonkeyPatch, argv: List[str]) -> int:
    monkeypatch.setattr(sys, "argv", ["azconfig"] + argv)
    with pytest.raises(SystemExit) as exc_info:
        main()
    return int(exc_info.value.code or 0)


class TestValidateCommand:
    def test_valid_config(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        valid_toml_path: str,
    ) -> None:
        assert _run(monkeypatch, ["validate", "--config", valid_toml_path]) == 0
        out = capsys.readouterr().out
        assert out.startswith("OK:")
        assert "location=eastus" in out
        assert "s3cr3t-value" not in out

    def test_missing_field_exits_nonzero(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        write_config: Callable[..., str],
    ) -> None:
        path = write_config('[credentials]\ntenant_id = "t"\n')
        assert _run(monkeypatch, ["validate", "--config", path]) == 1
        err = capsys.readouterr().err
        assert err.startswith("ERROR:")
        assert "missing client_id" in err

    def test_config_from_environment(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        valid_yaml_path: str,
    ) -> None:
        monkeypatch.setenv("AZCONFIG_CONFIG_FILE", valid_yaml_path)
        assert _run(monkeypatch, ["validate"]) == 0
        assert "cloud=china" in capsys.readouterr().out


class TestEnvCommand:
    def test_prints_arm_variables(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        valid_toml_path: str,
    ) -> None:
        assert _run(monkeypatch, ["env", "--config", valid_toml_path, "--export"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "export ARM_CLIENT_SECRET=s3cr3t-value" in lines
        assert (
            "export ARM_TENANT_ID=00000000-0000-0000-0000-000000000001" in lines
        )
        assert len(lines) == 4


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("AZCONFIG_CONFIG_FILE", raising=False)
        monkeypatch.delenv("AZCONFIG_LOG_LEVEL", raising=False)
        settings = AzConfigSettings()
        assert settings.config_file == "config.toml"
        assert settings.log_level == "WARNING"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AZCONFIG_LOG_LEVEL", "DEBUG")
        assert AzConfigSettings().log_level == "DEBUG"


class TestLogLevel:
    def test_lowercase_level_accepted(
        self,
        monkeypatch: pytest.MonkeyPatch,
        valid_toml_path: str,
    ) -> None:
        argv = ["--log-level", "debug", "validate", "--config", valid_toml_path]
        assert _run(monkeypatch, argv) == 0

    def test_unknown_level_flag_is_usage_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        valid_toml_path: str,
    ) -> None:
        argv = ["--log-level", "verbose", "validate", "--config", valid_toml_path]
        assert _run(monkeypatch, argv) == 2
        err = capsys.readouterr().err
        assert "invalid choice" in err
        assert "Traceback" not in err

    def test_unknown_level_from_environment(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        valid_toml_path: str,
    ) -> None:
        monkeypatch.setenv("AZCONFIG_LOG_LEVEL", "verbose")
        assert _run(monkeypatch, ["validate", "--config", valid_toml_path]) == 1
        err = capsys.readouterr().err
        assert err.startswith("ERROR: unknown log level 'VERBOSE'")


class TestTokenCommand:
    def test_custom_cloud_without_endpoint_needs_scope(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        write_config: Callable[..., str],
    ) -> None:
        path = write_config(
            "[credentials]\n"
            'tenant_id = "t"\n'
            'client_id = "c"\n'
            'subscription_id = "s"\n'
            'client_secret = "x"\n'
            "[credentials.client_options.cloud]\n"
            'environment = "custom"\n'
            'authority_host = "login.azurestack.local"\n'
        )
        assert _run(monkeypatch, ["token", "--config", path]) == 1
        err = capsys.readouterr().err
        assert err.startswith("ERROR:")
        assert "resource_manager_endpoint" in err
