from netwatch.monitor import main

main()
