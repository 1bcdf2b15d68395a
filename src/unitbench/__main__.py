"""Allow ``python -m unitbench``."""

from unitbench.cli.main import main

if __name__ == "__main__":
    main()
