"""Persisted configuration: defined keys, YAML store, and read-only snapshots."""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import click
import yaml

from nextplus.errors import ConfigError

APP_NAME = "nextjs-plus"
CONFIG_NAMESPACE = "nextjs_plus"
CONFIG_FILENAME = "config.yaml"
CONFIG_ENV_VAR = "NEXTPLUS_CONFIG"


@dataclass(frozen=True)
class Setting:
    name: str
    default: object
    description: str

    @property
    def value_type(self):
        return type(self.default)


def _option(name, default, description, prompt_name=None):
    prompt_name = prompt_name or f"{name}_prompt"
    return [
        Setting(name, default, description),
        Setting(prompt_name, False, f"Ask before using the stored '{name}' value."),
    ]


_SETTINGS = (
    _option("typescript", True, "Generate the project with TypeScript.")
    + _option("tailwind", True, "Install Tailwind CSS.")
    + _option("eslint", True, "Configure ESLint.")
    + _option("app_router", True, "Use the App Router instead of the Pages Router.")
    + _option(
        "use_src_directory", False, "Place application code inside src/.",
        prompt_name="src_directory_prompt",
    )
    + _option("experimental_app", False, "Enable experimental App Router features.")
    + _option("turbopack", True, "Use Turbopack for the dev server.")
    + _option("react_compiler", False, "Enable the React Compiler.")
    + _option("import_alias", "@/*", "Module import alias passed to --import-alias.")
    + _option("shadcn_init", True, "Run shadcn/ui init after project creation.")
    + _option("shadcn_install_all", False, "Install every shadcn/ui component.")
    + [
        Setting("default_location", "", "Folder new projects are created in."),
        Setting("open_in_new_window", True, "Open the new project in a new editor window."),
        Setting("package_runner", "npx", "Runner used to invoke the generators."),
        Setting("editor_command", "code", "Editor command used to open the new project."),
    ]
)

SETTINGS: Mapping[str, Setting] = MappingProxyType({s.name: s for s in _SETTINGS})

_TRUE_WORDS = ("true", "yes", "on", "1")
_FALSE_WORDS = ("false", "no", "off", "0")


def default_config_path() -> Path:
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_FILENAME


def _check_type(key, value):
    expected = SETTINGS[key].value_type
    if type(value) is not expected:
        raise ConfigError(
            f"Setting '{key}' must be a {expected.__name__}, got {value!r}"
        )


def coerce_value(key, raw):
    """Convert a command-line string into the declared type of *key*."""
    if key not in SETTINGS:
        raise ConfigError(f"Unknown setting: {key}")
    if SETTINGS[key].value_type is bool:
        lowered = raw.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise ConfigError(f"Setting '{key}' expects true or false, got {raw!r}")
    return raw


@dataclass(frozen=True)
class Configuration:
    """Immutable view of the persisted settings, read once per command."""

    values: Mapping[str, object] = field(default_factory=dict)

    def get(self, key):
        if key not in SETTINGS:
            raise KeyError(key)
        return self.values.get(key, SETTINGS[key].default)

    def as_dict(self):
        return {key: self.get(key) for key in SETTINGS}


class ConfigStore:
    """YAML file holding the ``nextjs_plus`` settings namespace."""

    def __init__(self, path):
        self.path = Path(path)

    def _read_document(self):
        if not self.path.is_file():
            return {}
        try:
            document = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {self.path}: {exc}") from exc
        if not isinstance(document, dict):
            raise ConfigError(f"{self.path} must contain a mapping")
        return document

    def _read_namespace(self, document):
        section = document.get(CONFIG_NAMESPACE) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"'{CONFIG_NAMESPACE}' in {self.path} must be a mapping")
        return section

    def snapshot(self) -> Configuration:
        section = self._read_namespace(self._read_document())
        values = {}
        for key, value in section.items():
            if key not in SETTINGS or value is None:
                continue
            _check_type(key, value)
            values[key] = value
        return Configuration(MappingProxyType(values))

    def update(self, key, value):
        """Persist *value* under *key*, keeping every other entry in the file."""
        if key not in SETTINGS:
            raise ConfigError(f"Unknown setting: {key}")
        _check_type(key, value)
        document = self._read_document()
        section = dict(self._read_namespace(document))
        section[key] = value
        document[CONFIG_NAMESPACE] = section
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            yaml.safe_dump(document, default_flow_style=False, sort_keys=True),
            encoding="utf-8",
        )
