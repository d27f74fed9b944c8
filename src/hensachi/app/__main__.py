from hensachi.app.app import main

main()
