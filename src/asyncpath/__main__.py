from asyncpath.main import cli

cli()
