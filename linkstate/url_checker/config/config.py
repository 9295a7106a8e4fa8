# -*- coding: utf-8 -*-
import json
from os import getcwd
from os.path import join, isfile
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, confloat, conint, field_validator, model_validator

DEFAULT_CONFIG_NAME = "link_checker_config.json"
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class CheckerConfig(BaseModel):
    """
    Settings of the URL accessibility checker.

    :param timeout: Total timeout of one HTTP attempt in seconds.
    :param connect_timeout: Connection timeout of one HTTP attempt in seconds.
    :param max_redirects: Maximum number of redirects followed per URL.
    :param user_agent: User-Agent header sent with every request.
    :param verify_ssl: Verify TLS certificates.
    :param recheck_minutes: A link opened by the user is rechecked only if its last check is older.
    :param report_dir: Directory for CSV reports.
    """
    timeout: confloat(gt=0) = Field(10, description="Per-request timeout in seconds")
    connect_timeout: confloat(gt=0) = Field(5, description="Connection timeout in seconds")
    max_redirects: conint(ge=0) = Field(10, description="Redirects followed before giving up")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")
    recheck_minutes: confloat(ge=0) = Field(5, description="Minimum age of a check before a single link is rechecked")
    report_dir: str = Field("", description="Directory to store CSV reports")

    @model_validator(mode="before")
    @classmethod
    def set_default_report_dir(cls, values):
        """
        If 'report_dir' is an empty string or not provided, use reports/link_checker in the current directory.
        """
        if isinstance(values, dict) and not values.get("report_dir"):
            values["report_dir"] = join(getcwd(), "reports", "link_checker")
        return values

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("user_agent must be a non-empty string")
        return v.strip()

    @classmethod
    def load_from_file(cls, path: str | Path) -> "CheckerConfig":
        """
        Load configuration from a JSON file.

        :param path: Path to the JSON config file.
        :return: An instance of the CheckerConfig class.

        :raises FileNotFoundError: If the file does not exist.
        :raises json.JSONDecodeError: If the file is not valid JSON.
        :raises pydantic.ValidationError: If the data is invalid.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "CheckerConfig":
        """
        Load configuration from the given file, from link_checker_config.json
        in the current directory, or fall back to defaults.

        :param path: Optional path to the JSON config file.
        :return: An instance of the CheckerConfig class.
        """
        if path:
            return cls.load_from_file(path)

        default_path = join(getcwd(), DEFAULT_CONFIG_NAME)
        if isfile(default_path):
            return cls.load_from_file(default_path)
        return cls()
