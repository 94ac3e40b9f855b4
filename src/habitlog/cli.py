"""Flask CLI commands for Habits Log."""

from __future__ import annotations

from pathlib import Path

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("habitlog-create-user")
    @click.argument("username")
    @click.password_option()
    def habitlog_create_user(username: str, password: str) -> None:
        """Create a user that can sign in to the web API."""

        from .extensions import get_session_factory
        from .services.auth import create_user

        try:
            user = create_user(
                username=username,
                password=password,
                session_factory=get_session_factory(),
            )
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"Created user {user.username} (id={user.id})")

    @app.cli.command("habitlog-render")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
    def habitlog_render(path: Path) -> None:
        """Print the HTML a note file renders to."""

        from .services.markup import render_note

        click.echo(render_note(path.read_text(encoding="utf-8")))
