"""Tests for CLI module."""

import pytest

from ci_tracer.cli import parse_config


def test_parse_config_defaults() -> None:
    """Builds the default configuration without arguments."""
    config = parse_config([])

    assert config.listen_address == "127.0.0.1:3000"
    assert config.tracer == "otlp"
    assert config.tracer_config == {}
    assert config.instances == []


def test_parse_config_with_instances() -> None:
    """Parses JSON tracer configuration and instances."""
    config = parse_config(
        [
            "--listen-address",
            "0.0.0.0:8080",
            "--tracer",
            "console",
            "--tracer-config",
            '{"service_name": "ci"}',
            "--instances",
            '[{"name": "gitlab-com", "token": "s3cr3t"}, {"name": "internal"}]',
        ]
    )

    assert config.port == 8080
    assert config.tracer == "console"
    assert config.tracer_config == {"service_name": "ci"}
    assert [i.name for i in config.instances] == ["gitlab-com", "internal"]
    assert config.instances[0].token is not None
    assert config.instances[1].token is None


@pytest.mark.parametrize(
    "argv",
    [
        ["--instances", "not json"],
        ["--instances", '[{"token": "missing-name"}]'],
        ["--listen-address", "localhost"],
        ["--max-body-size", "0"],
    ],
)
def test_parse_config_rejects_invalid_configuration(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    """Exits with a usage error on invalid configuration."""
    with pytest.raises(SystemExit) as exc_info:
        parse_config(argv)

    assert exc_info.value.code == 2
    assert "invalid configuration" in capsys.readouterr().err


def test_parse_config_max_body_size() -> None:
    """Parses the webhook body limit in bytes."""
    config = parse_config(["--max-body-size", "1048576"])

    assert config.max_body_size == 1048576
