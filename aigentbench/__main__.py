from aigentbench.cli import app

app()
