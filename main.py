"""MSSQL Table Browser."""

from adapters.inbound.cli import main


if __name__ == "__main__":
    main()
