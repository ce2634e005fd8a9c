"""Entry point for 'python -m quoteforge'."""

from quoteforge.cli import main

if __name__ == "__main__":
    main()
