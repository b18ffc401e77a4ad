from .STRATAFS import main

main()
