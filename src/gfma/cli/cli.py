"""CLI entrypoint: Typer app definition and command registration"""

import typer

from gfma.cli.commands import build_cmd, convert_cmd


app = typer.Typer(name="gfma", no_args_is_help=True, help="GitHub-flavored markdown admonitions for static sites")

app.command(name="build")(build_cmd)
app.command(name="convert")(convert_cmd)
