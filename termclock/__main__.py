from termclock.display import main

main()
