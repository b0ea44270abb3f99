"""Allow ``python -m augflow``."""

from augflow.cli import main

if __name__ == "__main__":
    main()
