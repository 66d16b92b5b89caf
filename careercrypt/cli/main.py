"""Main CLI application using Cyclopts.

Apart from ``serve`` the CLI is a thin HTTP client over the REST API.
"""

import cyclopts

from careercrypt.cli.commands import portfolios, server

app = cyclopts.App(
    name="careercrypt",
    help="CareerCrypt - career portfolio registry",
)

app.command(server.app, name="serve")
app.command(portfolios.app, name="portfolios")


def main() -> None:
    app()
