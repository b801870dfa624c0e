from tempcast.cli.main import main

main()
