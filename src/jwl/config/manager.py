"""Configuration manager that reads and writes the YAML context file."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..api.authorization import AccessToken, ApiToken, Authorization

logger = logging.getLogger(__name__)

API_TOKEN_KIND = "api_token"
ACCESS_TOKEN_KIND = "access_token"


class ConfigError(Exception):
    """Base class for configuration problems."""


class ConfigNotFound(ConfigError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No config found at `{path}`, run `jwl config` to create one")


class InvalidConfig(ConfigError):
    pass


class NoContextNameGiven(ConfigError):
    def __init__(self) -> None:
        super().__init__("When using multiple contexts, a context name should be passed")


class ContextNotFound(ConfigError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Context `{name}` was not found")


@dataclass(frozen=True)
class AppSettings:
    application_name: str = "jwl"
    config_name: str = "config"
    env_var: str = "JWL_CONFIG"

    def default_path(self) -> Path:
        """Config file path, ``JWL_CONFIG`` taking precedence."""
        override = os.getenv(self.env_var)
        if override:
            return Path(override).expanduser()
        base = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
        return Path(base) / self.application_name / f"{self.config_name}.yaml"


@dataclass(frozen=True)
class Context:
    """Named bundle of Jira domain and credentials."""

    authorization: Authorization
    jira_domain: str
    name: Optional[str] = None


@dataclass
class Config:
    """Either a single unnamed context or a list of named ones."""

    contexts: List[Context] = field(default_factory=list)
    multiple: bool = False

    @classmethod
    def single(cls, context: Context) -> "Config":
        return cls(contexts=[context], multiple=False)

    @classmethod
    def of(cls, contexts: List[Context]) -> "Config":
        return cls(contexts=list(contexts), multiple=True)


def authorization_to_dict(authorization: Authorization) -> Dict[str, str]:
    if isinstance(authorization, ApiToken):
        return {
            "kind": API_TOKEN_KIND,
            "username": authorization.username,
            "api_token": authorization.api_token,
        }
    if isinstance(authorization, AccessToken):
        return {"kind": ACCESS_TOKEN_KIND, "access_token": authorization.access_token}
    raise TypeError(f"Unsupported authorization: {type(authorization).__name__}")


def _required_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        raise InvalidConfig(f"authorization is missing `{key}`")
    if not isinstance(value, str):
        raise InvalidConfig(f"authorization `{key}` must be a string")
    return value


def authorization_from_dict(data: Any) -> Authorization:
    """Read an authorization entry.

    The ``kind`` tag decides the variant. Entries without one are matched by
    shape, trying the api token variant before the access token variant.
    """
    if not isinstance(data, dict):
        raise InvalidConfig("authorization must be a mapping")

    kind = data.get("kind")
    if kind is None:
        if "username" in data and "api_token" in data:
            kind = API_TOKEN_KIND
        elif "access_token" in data:
            kind = ACCESS_TOKEN_KIND

    if kind == API_TOKEN_KIND:
        return ApiToken(
            username=_required_str(data, "username"),
            api_token=_required_str(data, "api_token"),
        )
    if kind == ACCESS_TOKEN_KIND:
        return AccessToken(access_token=_required_str(data, "access_token"))
    raise InvalidConfig(f"Unknown authorization kind: {kind!r}")


def context_to_dict(context: Context) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if context.name is not None:
        data["name"] = context.name
    data["jira_domain"] = context.jira_domain
    data["authorization"] = authorization_to_dict(context.authorization)
    return data


def context_from_dict(data: Any) -> Context:
    if not isinstance(data, dict):
        raise InvalidConfig("context must be a mapping")
    if not data.get("jira_domain"):
        raise InvalidConfig("jira_domain is required")
    name = data.get("name")
    return Context(
        authorization=authorization_from_dict(data.get("authorization")),
        jira_domain=str(data["jira_domain"]),
        name=str(name) if name is not None else None,
    )


class ConfigManager:
    """Loads and stores the context configuration file."""

    def __init__(self, settings: AppSettings = AppSettings(), path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            settings: Application name and file naming
            path: Explicit config file path, overrides the settings lookup
        """
        self.settings = settings
        self.path = Path(path) if path is not None else settings.default_path()

    def load(self) -> Config:
        """Load configuration from disk.

        Raises:
            ConfigNotFound: If the file does not exist
            InvalidConfig: If the file cannot be parsed
        """
        if not self.path.exists():
            raise ConfigNotFound(self.path)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfig(f"Could not parse `{self.path}`: {e}") from e

        logger.debug(f"Loaded configuration from {self.path}")

        if isinstance(data, dict) and "contexts" in data:
            entries = data["contexts"]
            if not isinstance(entries, list):
                raise InvalidConfig("contexts must be a list")
            return Config.of([context_from_dict(entry) for entry in entries])
        return Config.single(context_from_dict(data))

    def store(self, config: Config) -> None:
        """Write configuration to disk, creating the directory if needed.

        Raises:
            InvalidConfig: If the config holds no context
        """
        if not config.contexts:
            raise InvalidConfig("config must hold at least one context")
        if config.multiple:
            data: Dict[str, Any] = {"contexts": [context_to_dict(c) for c in config.contexts]}
        else:
            data = context_to_dict(config.contexts[0])

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        logger.debug(f"Stored configuration at {self.path}")

    def read_context(self, name: Optional[str] = None) -> Context:
        """Resolve the context to use.

        Args:
            name: Context name, required only for multi-context configs

        Raises:
            NoContextNameGiven: If several contexts exist and no name was passed
            ContextNotFound: If no context carries ``name``
        """
        config = self.load()
        if not config.multiple:
            return config.contexts[0]

        if name is None:
            raise NoContextNameGiven()
        for context in config.contexts:
            if context.name == name:
                return context
        raise ContextNotFound(name)
