from datauri.cli import main

main()
