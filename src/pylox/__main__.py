"""Allow ``python -m pylox``."""

from pylox.cli import main

if __name__ == "__main__":
    main()
