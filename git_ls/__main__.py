"""Module entrypoint for ``python -m git_ls``.

Argument parsing and report building happen in ``git_ls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
