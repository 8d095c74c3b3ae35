from gradient_pace.cli import main

main()
