from filescout.cli import app

app()
