from drawmodes.main import main

main()
