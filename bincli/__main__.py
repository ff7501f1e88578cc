from bincli.main import main

main()
