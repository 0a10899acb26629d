"""CLI entrypoint: Typer app definition and command registration"""

import typer

from joplin2bear.cli.commands import check_cmd, migrate_cmd


app = typer.Typer(name="jb", no_args_is_help=True, help="Migrate Joplin Markdown exports to Bear")

app.command(name="migrate")(migrate_cmd)
app.command(name="check")(check_cmd)
