from snippet_eval.cli import main

main()
