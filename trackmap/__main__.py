from trackmap.cli import cli

cli()
