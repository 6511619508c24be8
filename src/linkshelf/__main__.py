"""Entry point for 'python -m linkshelf'."""

from linkshelf.cli import main

if __name__ == "__main__":
    main()
