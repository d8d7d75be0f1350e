"""Module entrypoint for ``python -m dirlist``.

All argument parsing happens in ``dirlist.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
