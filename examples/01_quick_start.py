#!/usr/bin/env python3
"""Quick Start Example

This example shows the most basic usage of pyxmgr:
- Launching XMGR
- Plotting a single column against its index
- Plotting a second set with custom styling
- Leaving XMGR open when the script ends
"""

from pyxmgr import XMGR


def main():
    """Run the quick start example."""
    xm = XMGR(title="Quick start")

    # One column: x is the index 0, 1, 2, ...
    xm.plot([1, 4, 2, 6, 5])

    # Second set, x and y given, dotted red line with plus symbols
    xm.set(1)
    xm.plot([0, 1, 2, 3, 4], [5, 3, 4, 1, 2], LINESTYLE="dotted", LINECOL="red", SYMBOL="plus")

    # Hand the window over to the user
    xm.detach()


if __name__ == "__main__":
    main()
