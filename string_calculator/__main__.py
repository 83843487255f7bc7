"""Package entry point for ``python -m string_calculator``."""

from string_calculator.cli import main

if __name__ == "__main__":
    main()
