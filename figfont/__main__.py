from .scripts.info import main

main()
