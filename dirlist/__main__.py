"""``python -m dirlist [-aAld] [path]``: list a directory or the path itself."""

from .cli import main


if __name__ == "__main__":
    main()
