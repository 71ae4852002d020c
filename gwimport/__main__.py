from gwimport.main import cli

cli()
