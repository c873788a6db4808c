from artifactcheck.cli.app import main

main()
