from minish.cli.app import app

app()
