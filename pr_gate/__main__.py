# AGPL-3.0 License

from pr_gate.cli import main

main()
