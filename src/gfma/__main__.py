from gfma.cli import app

app()
