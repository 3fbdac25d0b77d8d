from form_engine.cli import main

main()
