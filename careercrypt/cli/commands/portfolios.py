"""Portfolio commands. Thin HTTP client over the REST API."""

import os
import sys
from typing import Any

import cyclopts
import httpx

from careercrypt.cli.console import get_console

app = cyclopts.App(name="portfolios", help="Browse and review portfolios")


def get_server_url() -> str:
    return os.environ.get("CAREERCRYPT_SERVER", "http://localhost:8000")


def _request(method: str, path: str, *, wallet: str | None = None) -> Any:
    console = get_console()
    server_url = get_server_url()
    headers = {"X-Wallet-Address": wallet} if wallet else {}
    try:
        response = httpx.request(method, f"{server_url}{path}", headers=headers)
        response.raise_for_status()
        return response.json()
    except httpx.ConnectError:
        console.error(
            f"Could not connect to server at {server_url}",
            hint="Start it with: careercrypt serve",
        )
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        console.error(f"{e.response.status_code}: {_error_message(e.response)}")
        sys.exit(1)
    except httpx.ReadError:
        console.error("Connection lost while reading response")
        sys.exit(1)


def _error_message(response: httpx.Response) -> str:
    """Pull the API error message out of a response, or fall back to its text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    detail = body.get("detail", response.text) if isinstance(body, dict) else response.text
    if isinstance(detail, dict):
        return str(detail.get("message", detail))
    return str(detail)


@app.command(name="list")
def list_portfolios() -> None:
    """List every portfolio, newest first."""
    data = _request("GET", "/portfolios")
    get_console().portfolios(data["items"])


@app.command
def stats() -> None:
    """Show how many portfolios are pending, verified and rejected."""
    data = _request("GET", "/portfolios/stats")
    get_console().print(
        f"total {data['total']}  "
        f"[yellow]pending {data['pending']}[/yellow]  "
        f"[green]verified {data['verified']}[/green]  "
        f"[red]rejected {data['rejected']}[/red]"
    )


@app.command
def approve(portfolio_id: str, /, *, wallet: str) -> None:
    """Mark a pending portfolio as verified.

    Args:
        portfolio_id: Portfolio identifier.
        wallet: Address of the acting wallet.
    """
    data = _request("POST", f"/portfolios/{portfolio_id}/approve", wallet=wallet)
    get_console().success(f"{data['id']} is now {data['status']}")


@app.command
def reject(portfolio_id: str, /, *, wallet: str) -> None:
    """Mark a pending portfolio as rejected.

    Args:
        portfolio_id: Portfolio identifier.
        wallet: Address of the acting wallet.
    """
    data = _request("POST", f"/portfolios/{portfolio_id}/reject", wallet=wallet)
    get_console().success(f"{data['id']} is now {data['status']}")
