# schemas/daemon_config.py

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_LOG_DRIVER = "json-file"
DEFAULT_STORAGE_DRIVER = "auto"


class DaemonConfig(BaseModel):
    """
    The fields of ``/etc/docker/daemon.json`` that the audit reports.

    Any other daemon option is accepted and kept untouched. A field that is
    absent or null falls back to the value the daemon itself would use.
    """

    model_config = ConfigDict(
        # daemon.json carries many options the audit does not interpret
        extra="allow",
        frozen=True,
    )

    log_driver: str = Field(default=DEFAULT_LOG_DRIVER, alias="log-driver")
    storage_driver: str = Field(default=DEFAULT_STORAGE_DRIVER, alias="storage-driver")

    @field_validator("log_driver", mode="before")
    @classmethod
    def _default_log_driver(cls, value: object) -> object:
        return DEFAULT_LOG_DRIVER if value is None else value

    @field_validator("storage_driver", mode="before")
    @classmethod
    def _default_storage_driver(cls, value: object) -> object:
        return DEFAULT_STORAGE_DRIVER if value is None else value


def parse_daemon_config(text: str) -> DaemonConfig:
    """
    Parse the contents of a daemon configuration file.

    Blank contents are accepted as an empty configuration, as the daemon
    itself accepts them.

    Args:
        text: Raw file contents.

    Raises:
        ValidationError: If the text is not JSON, is not a JSON object, or a
            reported field has an unusable type.

    Returns:
        DaemonConfig: The parsed configuration.
    """
    if not text.strip():
        return DaemonConfig()
    return DaemonConfig.model_validate_json(text)


def describe_invalid_config(error: ValidationError) -> str:
    """
    Summarise why a daemon configuration file was rejected.

    Returns:
        str: ``invalid JSON`` for syntax errors, otherwise the first
            validation message.
    """
    problems = error.errors()
    if not problems or any(problem["type"] == "json_invalid" for problem in problems):
        return "invalid JSON"

    first = problems[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"invalid value for {location}: {first['msg']}"
    return f"invalid structure: {first['msg']}"
