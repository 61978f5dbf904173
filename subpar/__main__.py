"""Package entry point for ``python -m subpar``.

WHY: Users run the filter as ``python -m subpar -w 60 < notes.txt`` as
well as through the ``subpar`` console script.

HOW: Delegates to the CLI's main() function.
"""

from subpar.cli import main

if __name__ == "__main__":
    main()
