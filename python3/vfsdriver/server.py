#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

# server.py - FTP server serving an fsspec filesystem through DriverFS
#
# Copyright (c) 2005-2020 Fpemud <fpemud@sina.com>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.

"""
The configuration is a JSON object, normally passed as the first command
line argument of libexec/ftpd.py:

    {
        "logFile": "/var/log/vfsdriver/ftpd.log",
        "logMaxBytes": 10485760,
        "logBackupCount": 2,
        "ip": "0.0.0.0",
        "port": 21,
        "backend": "dir",
        "backendOptions": {"path": "/srv/ftp", "target_protocol": "file"},
        "perm": "elr"
    }

"backend" is any fsspec protocol name, "backendOptions" its keyword arguments.
"""

import json
import logging
import logging.handlers
import fsspec
import pyftpdlib.servers
import pyftpdlib.handlers
import pyftpdlib.authorizers
from vfsdriver.fileinfo import SimplePerm
from vfsdriver.factory import DriverFactory
from vfsdriver.ftpfs import DriverFS


def loadCfg(arg):
    cfg = json.loads(arg)
    if not isinstance(cfg, dict):
        raise Exception("config is not a JSON object")
    for key in ["logFile", "logMaxBytes", "logBackupCount", "ip", "port", "backend"]:
        if key not in cfg:
            raise Exception("no \"%s\" in config file" % (key))
    if not isinstance(cfg["port"], int) or not (0 <= cfg["port"] < 65536):
        raise Exception("value of \"port\" is invalid")

    if "backendOptions" not in cfg:
        cfg["backendOptions"] = dict()
    elif not isinstance(cfg["backendOptions"], dict):
        raise Exception("value of \"backendOptions\" is invalid")
    if "perm" not in cfg:
        cfg["perm"] = "elr"
    if "owner" not in cfg:
        cfg["owner"] = "owner"
    if "group" not in cfg:
        cfg["group"] = "group"
    return cfg


def createServer(cfg):
    """
    Note that with the "memory" backend every open of a file returns the same
    stored file object, so concurrent downloads of one file share a position.
    """

    fs = fsspec.filesystem(cfg["backend"], **cfg["backendOptions"])
    factory = DriverFactory(fs, SimplePerm(cfg["owner"], cfg["group"]))

    # pyftpdlib checks home directories on local disk, "/" is the virtual root anyway
    authorizer = pyftpdlib.authorizers.DummyAuthorizer()
    authorizer.add_anonymous("/", perm=cfg["perm"])

    handler = type("DriverFTPHandler", (pyftpdlib.handlers.FTPHandler,), {
        "authorizer": authorizer,
        "abstracted_fs": DriverFS.bind(factory),
        "use_sendfile": False,                      # download handles have no fileno()
    })

    return pyftpdlib.servers.FTPServer((cfg["ip"], cfg["port"]), handler)


def runServer(cfg):
    log = logging.getLogger("pyftpdlib")
    log.propagate = False
    log.setLevel(logging.INFO)
    log.addHandler(logging.handlers.RotatingFileHandler(cfg["logFile"], maxBytes=cfg["logMaxBytes"], backupCount=cfg["logBackupCount"]))

    server = createServer(cfg)
    log.info("FTP server started, listening on %s:%d, backend %s." % (cfg["ip"], cfg["port"], cfg["backend"]))
    server.serve_forever()
