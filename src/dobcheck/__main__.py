from dobcheck.cli import main

main()
