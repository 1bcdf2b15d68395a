import logging

from unitbench.core.exceptions import ArtifactNotFound, ConfigurationError, UnitExecutionFailed


def test_logged_context_matches_stored_context(caplog):
    caplog.set_level(logging.DEBUG, logger="unitbench.core.exceptions")

    error = ConfigurationError("bad value")

    record = caplog.records[-1]
    assert error.context == {}
    assert record.context == error.context
    assert record.error_code == "CONFIGURATION_ERROR"


def test_artifact_errors_carry_path_and_cause():
    cause = FileNotFoundError("no such file")

    error = ArtifactNotFound("units/a.py", cause=cause)

    assert error.error_code == "ARTIFACT_NOT_FOUND"
    assert error.context == {"path": "units/a.py", "cause": "no such file"}
    assert "no such file" in error.message


def test_execution_failure_names_the_cause_type():
    error = UnitExecutionFailed("u.py", ValueError("boom"))

    assert error.message == "Unit 'u.py' failed: ValueError: boom"
    assert error.context["cause"] == "ValueError('boom')"
