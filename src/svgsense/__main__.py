from svgsense.main import cli

cli()
