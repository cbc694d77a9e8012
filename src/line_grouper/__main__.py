"""Allow ``python -m line_grouper``."""

from line_grouper.cli.main import main

if __name__ == "__main__":
    main()
