"""Entry point for 'python -m orgadmin' command."""

from orgadmin.cli import main

if __name__ == "__main__":
    main()
