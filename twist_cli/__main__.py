from twist_cli.cli.main import main

main()
