from movelist.app import main

main()
