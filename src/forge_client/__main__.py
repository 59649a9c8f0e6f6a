from forge_client.cli import app

app()
