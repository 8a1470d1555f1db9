from fenview.app import main

main()
