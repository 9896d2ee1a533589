from firebase_architect.cli import main

main()
