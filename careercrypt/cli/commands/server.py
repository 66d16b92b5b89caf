"""Run the API server in the foreground."""

import cyclopts
import uvicorn

app = cyclopts.App(name="serve", help="Run the CareerCrypt API server")


@app.default
def serve(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the API server.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development only).
    """
    uvicorn.run(
        "careercrypt.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # configure_logging owns the handlers
    )
