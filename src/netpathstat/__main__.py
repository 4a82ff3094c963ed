from netpathstat.cli import main

main()
