#!/usr/bin/env python3
"""Function Interface Example

For quick interactive use there is one shared XMGR session behind
plain functions:
- xmgr() plots on the current set
- xmgrset() picks the set
- xmgrprint() sends any XMGR command
- xmgrdetach() leaves XMGR running for the user
"""

import logging

from pyxmgr import xmgr, xmgrdetach, xmgrprint, xmgrset


def main():
    logging.basicConfig(level=logging.INFO)

    xmgr([3, 1, 4, 1, 5, 9, 2, 6], LINESTYLE="solid")
    xmgrset(1)
    xmgr([0, 2, 4, 6], [2, 7, 1, 8], SYMBOL="triangleup", LINECOL="green")
    xmgrprint("legend on")
    xmgrprint("redraw")
    xmgrdetach()


if __name__ == "__main__":
    main()
