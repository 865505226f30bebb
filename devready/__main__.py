from devready.cli.app import main

main()
