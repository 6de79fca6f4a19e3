"""
Builder configuration: default content language and verbosity.

Values come from the environment (optionally seeded from a .env file) or
from a YAML file checked against a small JSON Schema.
"""
from __future__ import annotations
import locale
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml
from dotenv import load_dotenv
from jsonschema import Draft202012Validator

from .constants import UNDETERMINED_LANGUAGE
from .errors import ConfigError

LanguageProvider = Callable[[], str]

_CONFIG_SCHEMA: Dict[str, Any] = {
    "title": "swid builder configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "language": {"type": "string", "minLength": 1, "pattern": "^[A-Za-z]{2,8}(-[A-Za-z0-9]{1,8})*$"},
        "verbose": {"type": "boolean"},
    },
}

_TRUTHY = {"1", "true", "yes", "on"}


def locale_language() -> str:
    """BCP-47 tag for the current process locale, e.g. en_US.UTF-8 -> en-US"""
    try:
        name = locale.getlocale()[0]
    except ValueError:
        name = None
    if not name or name in ("C", "POSIX"):
        return UNDETERMINED_LANGUAGE
    return name.split(".")[0].replace("_", "-")


@dataclass
class BuilderConfig:
    language: Optional[str] = None
    verbose: bool = False

    @staticmethod
    def from_env(env_file: Optional[Path] = None) -> "BuilderConfig":
        dotenv_path = env_file if env_file is not None else Path.cwd() / ".env"
        # existing environment variables win over the file
        if dotenv_path.exists():
            load_dotenv(dotenv_path, override=False)
        language = os.environ.get("SWID_LANGUAGE") or None
        verbose = os.environ.get("SWID_VERBOSE", "").strip().lower() in _TRUTHY
        return BuilderConfig(language=language, verbose=verbose)

    @staticmethod
    def from_file(path: Path) -> "BuilderConfig":
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"{path}: cannot read config: {e}") from e
        data = data or {}

        validator = Draft202012Validator(_CONFIG_SCHEMA)
        errs = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
        if errs:
            details = "; ".join(f"{'/'.join(map(str, e.path)) or '<root>'}: {e.message}" for e in errs)
            raise ConfigError(f"{path}: invalid config: {details}")

        return BuilderConfig(language=data.get("language"), verbose=data.get("verbose", False))

    def language_provider(self) -> LanguageProvider:
        if self.language:
            language = self.language
            return lambda: language
        return locale_language
