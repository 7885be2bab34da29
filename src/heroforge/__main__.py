from heroforge.main import main

main()
