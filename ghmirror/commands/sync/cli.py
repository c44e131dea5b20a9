"""CLI for mirroring every repository of an account."""

import typer

from ...config.settings import get_settings
from ...core.errors import ConfigError, FetchError
from ...core.github_client import GitHubClient
from ...core.reconciler import MirrorReconciler
from .service import sync_all

app = typer.Typer(add_completion=False)


@app.command()
def sync(
    username: str | None = typer.Option(None, help="GitHub account (default: GITHUB_USERNAME)"),
    token: str | None = typer.Option(None, help="GitHub PAT (default: GITHUB_TOKEN)"),
    dest: str | None = typer.Option(None, help="Target directory (default: REPO_DIR)"),
    bare: bool | None = typer.Option(
        None, "--bare/--worktree", help="Bare mirrors or working copies (default: MIRROR_BARE, else bare)"
    ),
):
    """Clone missing repositories and fetch into existing mirrors."""
    try:
        s = get_settings(
            github_username=username,
            github_token=token,
            repo_dir=dest,
            bare=bare,
        ).require()
        client = GitHubClient(s.github_username, s.github_token, api_base=s.api_base)
        summary = sync_all(client, MirrorReconciler(bare=s.bare), s.repo_dir)
    except (ConfigError, FetchError) as e:
        typer.secho(f"Error: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    if summary.failed:
        typer.echo(f"Failed: {', '.join(summary.failed)}", err=True)
