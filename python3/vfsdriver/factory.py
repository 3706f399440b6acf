#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

# factory.py - creates one driver per FTP session
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

import logging
from vfsdriver.driver import Driver
from vfsdriver.fileinfo import SimplePerm


class DriverFactory:

    """
    Example:
        factory = DriverFactory(fsspec.filesystem("memory"))
        driver = factory.newDriver()        # once per connection
    """

    rootDir = "/"

    def __init__(self, fs, perm=None):
        self.fs = fs                        # shared by every driver, never replaced
        if perm is not None:
            self.perm = perm
        else:
            self.perm = SimplePerm("owner", "group")

    def newDriver(self):
        driver = Driver(self.fs, self.rootDir, self.perm)
        logging.debug("Driver created for filesystem %s." % (type(self.fs).__name__))
        return driver
