"""Package entry point for ``python -m jdi``.

WHY: Users run the generator as ``python -m jdi index.js lib/util.js``
without installing the ``jdi`` console script.

HOW: Delegates to the CLI's main() function.

RULES:
- This file must exist for ``python -m jdi`` to work
- All argument handling lives in jdi.cli
"""

from jdi.cli import main

if __name__ == "__main__":
    main()
