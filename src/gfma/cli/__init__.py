from gfma.cli.cli import app

__all__ = ["app"]
