"""Allow ``python -m lexci_cli``."""

from lexci_cli.cli import main

if __name__ == "__main__":
    main()
