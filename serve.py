#!/usr/bin/env python3
"""
Script to run one tier of the product catalog.

    python serve.py server --port 8000
    python serve.py client --port 8080
"""
import click
import uvicorn

APPS = {
    "server": "catalog_server.main:create_app",
    "client": "catalog_client.main:create_app",
}


@click.command()
@click.argument("tier", type=click.Choice(sorted(APPS)))
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option("--port", type=int, default=8000, show_default=True, help="Port to listen on.")
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve(tier: str, host: str, port: int, reload: bool) -> None:
    """Run a product catalog service."""
    uvicorn.run(APPS[tier], factory=True, host=host, port=port, reload=reload)


if __name__ == "__main__":
    serve()
