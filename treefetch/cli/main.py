import typer

from treefetch.cli.commands import fetch

app = typer.Typer(
    name="treefetch",
    help="Host information beside a piece of ASCII art.",
    add_completion=False,
)

app.command("fetch")(fetch.fetch)

if __name__ == "__main__":
    app()
