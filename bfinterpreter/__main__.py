from bfinterpreter.main import main


main()
