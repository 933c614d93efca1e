"""Module entrypoint for ``python -m recentstar``.

All argument parsing happens in ``recentstar.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
