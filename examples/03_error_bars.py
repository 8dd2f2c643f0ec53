#!/usr/bin/env python3
"""Error Bars over an Anonymous Pipe

Multi-column set types (XYDY here) need every column delivered, which
only the anonymous pipe does. This example:
- Switches to an anonymous pipe for the whole process
- Plots x, y and dy as an XYDY set
- Switches the graph to a log y axis
"""

import numpy as np

from pyxmgr import XMGR, config


def main():
    x = np.arange(1, 11)
    y = x ** 2
    dy = np.sqrt(y)

    # Must be set before the client exists: it picks the pipe and the data format.
    config.NAMED_PIPE = False
    xm = XMGR(title="Error bars")
    xm.plot(x, y, dy, SETTYPE="xydy", SYMBOL="square", LINESTYLE="none")
    xm.graphtype("logy")
    xm.autoscale()
    xm.redraw()
    xm.detach()


if __name__ == "__main__":
    main()
