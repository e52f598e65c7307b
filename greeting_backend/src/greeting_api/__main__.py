from greeting_api.main import main

main()
