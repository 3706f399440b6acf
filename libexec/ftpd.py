#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

import sys
import vfsdriver.server


if __name__ == "__main__":
    cfg = vfsdriver.server.loadCfg(sys.argv[1])
    vfsdriver.server.runServer(cfg)
