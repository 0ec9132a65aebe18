"""CLI entrypoint: Typer app definition and command registration"""

import typer

from postfeed.cli.commands import build_cmd, check_cmd, list_cmd, show_cmd


app = typer.Typer(name="postfeed", no_args_is_help=True, help="Markdown blog posts to a JSON feed")

app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
