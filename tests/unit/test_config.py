"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_defaults_leave_database_unconfigured() -> None:
    settings = Settings(_env_file=None)
    assert settings.database_url == ""
    assert settings.telemetry_enabled is False
    assert settings.request_id_header == "X-Request-ID"


def test_unknown_telemetry_exporter_rejected() -> None:
    with pytest.raises(ValidationError, match="telemetry_exporter"):
        Settings(_env_file=None, telemetry_exporter="jaeger")


def test_sample_rate_out_of_range_rejected() -> None:
    with pytest.raises(ValidationError, match="telemetry_sample_rate"):
        Settings(_env_file=None, telemetry_sample_rate=1.5)


def test_non_positive_command_timeout_rejected() -> None:
    with pytest.raises(ValidationError, match="db_command_timeout"):
        Settings(_env_file=None, db_command_timeout=0)
