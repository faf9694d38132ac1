"""``python -m stagetree`` behaves exactly like the ``stagetree`` script."""

from .cli import main


if __name__ == "__main__":
    main()
