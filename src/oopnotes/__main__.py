from oopnotes.cli import cli

cli()
