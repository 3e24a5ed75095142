from letcalc.main import main

main()
