from aggregen.cli import cli

cli()
