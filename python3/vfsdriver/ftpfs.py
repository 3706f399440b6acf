#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

# ftpfs.py - pyftpdlib filesystem that goes through a driver
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

import os
import stat
import errno
import tempfile
import functools
import pyftpdlib.filesystems
from pyftpdlib.filesystems import FilesystemError
from vfsdriver.errors import NameCollisionError


_errnoMap = [
    (FileNotFoundError, errno.ENOENT),
    (FileExistsError, errno.EEXIST),
    (NotADirectoryError, errno.ENOTDIR),
    (IsADirectoryError, errno.EISDIR),
    (PermissionError, errno.EACCES),
]


def _withErrno(func):
    # pyftpdlib renders OSError with os.strerror(err.errno), fsspec often leaves errno unset
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except OSError as e:
            if e.errno is not None:
                raise
            code = errno.EIO
            for cls, c in _errnoMap:
                if isinstance(e, cls):
                    code = c
                    break
            raise OSError(code, os.strerror(code), str(e)) from e
    return wrapper


class DriverFS(pyftpdlib.filesystems.AbstractedFS):

    """
    pyftpdlib creates one AbstractedFS per logged in connection, so every
    instance asks the bound DriverFactory for its own Driver.

    Example:
        handler.abstracted_fs = DriverFS.bind(DriverFactory(fs))
    """

    driverFactory = None

    @classmethod
    def bind(cls, factory):
        return type(cls.__name__, (cls,), {"driverFactory": factory})

    def __init__(self, root, cmd_channel):
        super().__init__(root, cmd_channel)
        self.driver = self.driverFactory.newDriver()

    # --- Pathname / conversion utilities

    def validpath(self, path):
        # virtual paths never leave the backend
        return True

    # --- Wrapper methods around open() and tempfile.mkstemp

    @_withErrno
    def open(self, filename, mode):
        if mode == "rb":
            size, handle = self.driver.openForRead(filename, 0)
            return handle
        if mode in ["wb", "ab"]:
            # putFile() only runs when pyftpdlib closes the file, too late for a reply
            self._checkUploadTarget(filename)
            return UploadBuffer(self.driver, filename, mode == "ab")
        raise FilesystemError("open mode %s not supported" % (mode))

    def mkstemp(self, suffix='', prefix='', dir=None, mode='wb'):
        raise FilesystemError("unique file names not supported")

    # --- Wrapper methods around os.* calls

    @_withErrno
    def chdir(self, path):
        self.driver.changeDirectory(path)
        self.cwd = self.fs2ftp(path)

    @_withErrno
    def mkdir(self, path):
        self.driver.makeDirectory(path)

    @_withErrno
    def listdir(self, path):
        ret = []
        self.driver.listDirectory(path, lambda f: ret.append(f.name))
        return ret

    def listdirinfo(self, path):
        return self.listdir(path)

    @_withErrno
    def rmdir(self, path):
        self.driver.deleteDirectory(path)

    @_withErrno
    def remove(self, path):
        self.driver.deleteFile(path)

    @_withErrno
    def rename(self, src, dst):
        self.driver.rename(src, dst)

    def chmod(self, path, mode):
        raise FilesystemError("chmod not supported")

    @_withErrno
    def stat(self, path):
        f = self.driver.stat(path)
        if f.isDir:
            mode = stat.S_IFDIR | 0o755
        else:
            mode = stat.S_IFREG | 0o644
        # (mode, ino, dev, nlink, uid, gid, size, atime, mtime, ctime)
        return os.stat_result((mode, 0, 0, 1, 0, 0, f.size, 0, 0, 0))

    def utime(self, path, timeval):
        raise FilesystemError("utime not supported")

    def lstat(self, path):
        return self.stat(path)

    def readlink(self, path):
        raise FilesystemError("symbolic links not supported")

    # --- Wrapper methods around os.path.* calls

    def isfile(self, path):
        try:
            return not self.driver.stat(path).isDir
        except OSError:
            return False

    def islink(self, path):
        return False

    def isdir(self, path):
        try:
            return self.driver.stat(path).isDir
        except OSError:
            return False

    @_withErrno
    def getsize(self, path):
        return self.driver.stat(path).size

    def getmtime(self, path):
        raise FilesystemError("modification time not available")

    def realpath(self, path):
        return path

    def lexists(self, path):
        try:
            self.driver.stat(path)
            return True
        except OSError:
            return False

    def get_user_by_uid(self, uid):
        return self.driver.perm.owner

    def get_group_by_gid(self, gid):
        return self.driver.perm.group

    def _checkUploadTarget(self, path):
        try:
            f = self.driver.stat(path)
        except FileNotFoundError:
            return
        if f.isDir:
            raise NameCollisionError(path)


class UploadBuffer:

    """
    File object handed to pyftpdlib for STOR / APPE. Received data is spooled
    locally and stored with Driver.putFile() when pyftpdlib closes it.
    """

    maxMemorySize = 1024 * 1024

    def __init__(self, driver, name, appendData):
        self.name = name
        self.bytesWritten = None
        self._driver = driver
        self._appendData = appendData
        self._buf = tempfile.SpooledTemporaryFile(max_size=self.maxMemorySize)

    @property
    def closed(self):
        return self._buf.closed

    def write(self, data):
        return self._buf.write(data)

    def close(self):
        if self._buf.closed:
            return
        try:
            self._buf.seek(0)
            self.bytesWritten = self._driver.putFile(self.name, self._buf, self._appendData)
        finally:
            self._buf.close()
