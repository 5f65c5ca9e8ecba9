"""Interactive creation of the configuration file."""

from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from ..api.authorization import AccessToken, ApiToken, Authorization
from .manager import Config, ConfigError, ConfigManager, Context

ACCESS_TOKEN = "Access token"
API_TOKEN = "Api token"
AUTH_METHODS = [ACCESS_TOKEN, API_TOKEN]


class FailedToSelectAuthorization(ConfigError):
    def __init__(self) -> None:
        super().__init__("An invalid authorization method was selected")


def _prompt_secret(console: Console, label: str) -> str:
    """Ask for a hidden value twice until both entries match."""
    while True:
        value = Prompt.ask(label, password=True, console=console)
        confirmation = Prompt.ask(f"{label} confirmation", password=True, console=console)
        if value == confirmation:
            return value
        console.print(f"[red]The confirmation differed from the entered {label.lower()}[/red]")


def prompt_api_token(console: Console) -> ApiToken:
    username = Prompt.ask("Username", console=console)
    api_token = _prompt_secret(console, "Api token")
    return ApiToken(username=username, api_token=api_token)


def prompt_access_token(console: Console) -> AccessToken:
    return AccessToken(access_token=_prompt_secret(console, "Access token"))


def prompt_authorization(console: Console) -> Authorization:
    """Ask which credential kind to use and prompt for it.

    ``Prompt.ask`` re-asks until one of ``AUTH_METHODS`` is entered, so
    ``FailedToSelectAuthorization`` only guards against a choice list that
    has no matching branch.
    """
    method = Prompt.ask(
        "Authorization method", choices=AUTH_METHODS, default=ACCESS_TOKEN, console=console
    )
    if method == API_TOKEN:
        return prompt_api_token(console)
    if method == ACCESS_TOKEN:
        return prompt_access_token(console)
    raise FailedToSelectAuthorization()


def setup_config(manager: ConfigManager, console: Optional[Console] = None) -> Config:
    """Prompt for a Jira domain and credentials and store them as a single context."""
    console = console or Console()

    jira_domain = Prompt.ask("Jira domain to connect to", console=console)
    authorization = prompt_authorization(console)

    config = Config.single(Context(authorization=authorization, jira_domain=jira_domain))
    manager.store(config)

    console.print("Config created, application ready for use")
    return config
