from duckgpt.cli import main

main()
