"""Allow ``python -m live_book`` to open the interactive book."""

from live_book.cli.play import main

if __name__ == "__main__":
    main()
