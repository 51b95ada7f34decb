from aero_erp.cli import main

main()
