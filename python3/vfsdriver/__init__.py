#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

# __init__.py - FTP storage driver over pluggable virtual filesystems
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
vfsdriver

@author: Fpemud
@license: GPLv3 License
@contact: fpemud@sina.com
"""

from vfsdriver.errors import DriverError
from vfsdriver.errors import NotFoundError
from vfsdriver.errors import NotADirError
from vfsdriver.errors import NameCollisionError
from vfsdriver.errors import AlreadyExistsError
from vfsdriver.errors import BackendError
from vfsdriver.fileinfo import FileInfo
from vfsdriver.fileinfo import SimplePerm
from vfsdriver.driver import Driver
from vfsdriver.driver import ReadHandle
from vfsdriver.factory import DriverFactory

__author__ = "fpemud@sina.com (Fpemud)"
__version__ = "0.0.1"
