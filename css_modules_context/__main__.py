"""Allow ``python -m css_modules_context``."""

from .cli import main

if __name__ == "__main__":
    main()
