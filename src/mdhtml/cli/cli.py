"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdhtml.cli.commands import convert_cmd


app = typer.Typer(name="mdhtml", add_completion=False, help="Convert a Markdown document to HTML")

app.command(name="convert")(convert_cmd)
