#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

# errors.py - error types raised by the filesystem driver
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

import errno


class DriverError(OSError):
    """Base class of the errors raised by the driver itself.

    Always constructed as (errno, message, path) so that the protocol layer
    can render it like any other OSError.
    """


class NotADirError(DriverError, NotADirectoryError):

    def __init__(self, path):
        super().__init__(errno.ENOTDIR, "not a dir", path)


class NameCollisionError(DriverError, FileExistsError):

    def __init__(self, path, msg="a dir has the same name"):
        super().__init__(errno.EEXIST, msg, path)


class AlreadyExistsError(NameCollisionError):

    def __init__(self, path):
        super().__init__(path, "file already exists")


class BackendError(DriverError):

    def __init__(self, path, msg):
        super().__init__(errno.EIO, msg, path)


# the backend's own exception is passed through for missing entries
NotFoundError = FileNotFoundError
