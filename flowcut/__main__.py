from flowcut.cli import main

main()
