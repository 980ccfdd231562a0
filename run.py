from recordings.server import main

main()
