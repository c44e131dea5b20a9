"""CLI for listing the repositories that would be mirrored."""

import typer

from ...config.settings import get_settings
from ...core.errors import ConfigError, FetchError
from ...core.github_client import GitHubClient
from .service import format_repos, list_repos

app = typer.Typer(add_completion=False)


@app.command(name="list")
def list_cmd(
    username: str | None = typer.Option(None, help="GitHub account (default: GITHUB_USERNAME)"),
    token: str | None = typer.Option(None, help="GitHub PAT (default: GITHUB_TOKEN)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tab-separated lines"),
):
    """Print every repository of the account without touching the disk."""
    try:
        s = get_settings(github_username=username, github_token=token).require(dest=False)
        repos = list_repos(GitHubClient(s.github_username, s.github_token, api_base=s.api_base))
    except (ConfigError, FetchError) as e:
        typer.secho(f"Error: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    if repos or as_json:
        typer.echo(format_repos(repos, as_json=as_json))
