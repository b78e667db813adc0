from md2html.cli import main

main()
