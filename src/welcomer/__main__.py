from welcomer.cli import cli

cli()
