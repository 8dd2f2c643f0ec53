#!/usr/bin/env python3
"""Restyling Example

Shows how to change a set after it has been plotted:
- configure() only touches the options given
- Option names are case-insensitive and may be abbreviated
- Colours, symbols and line styles by name or by XMGR code
"""

import time

import numpy as np

from pyxmgr import XMGR


def main():
    x = np.linspace(0.0, 2 * np.pi, 50)

    with XMGR(title="Restyling", debug=True) as xm:
        xm.plot(x, np.sin(x), SYMBOL="none")
        xm.set(1)
        xm.plot(x, np.cos(x), SYMBOL="none", LINECOLOUR="blue")
        time.sleep(2)

        xm.set(0)
        xm.configure(linest="dashed", linew=3)
        xm.set(1)
        xm.configure(SYMB="circle", SYMCOL=4, SYMFILL="filled")
        time.sleep(2)

        xm.world(0, 7, -1.5, 1.5)
        xm.redraw()
        time.sleep(2)


if __name__ == "__main__":
    main()
