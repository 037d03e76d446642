from inventory_demo.startup import main

main()
