#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

# driver.py - FTP storage driver over an fsspec filesystem
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
vfsdriver.driver

Translates the storage operations an FTP session needs (stat, list, cwd,
mkdir, rmdir, dele, rnfr/rnto, retr, stor/appe) into calls on an fsspec
filesystem, and hands the results back as FileInfo records.

One Driver belongs to one session. It holds no open resources between
calls and caches nothing; every operation asks the backend again.
"""

import io
import os
from vfsdriver.errors import NotADirError
from vfsdriver.errors import NameCollisionError
from vfsdriver.errors import AlreadyExistsError
from vfsdriver.errors import BackendError
from vfsdriver.fileinfo import FileInfo


class Driver:

    blockSize = 64 * 1024

    def __init__(self, fs, curDir, perm):
        self.fs = fs
        self.curDir = curDir        # raw path as given to changeDirectory()
        self.perm = perm            # opaque, never inspected here

    def stat(self, path):
        info = _withFallback(self.fs.info, candidatePaths(path, self.fs.sep))
        return FileInfo.fromInfo(info)

    def changeDirectory(self, path):
        f = self.stat(path)
        if not f.isDir:
            raise NotADirError(path)
        self.curDir = path

    def listDirectory(self, path, visit):
        """
        Calls visit(fileInfo) once per immediate child of path, in the order
        the backend lists them. An exception raised by visit() ends the
        enumeration and propagates to the caller as is. A file path raises
        NotADirError.
        """
        p = self._path(path)
        entries = self.fs.ls(p, detail=True)

        # fsspec lists a file as itself
        if len(entries) == 1 and entries[0]["type"] != "directory":
            sep = self.fs.sep
            if entries[0]["name"].strip(sep) == p.strip(sep):
                raise NotADirError(path)

        for info in entries:
            visit(FileInfo.fromInfo(info))

    def makeDirectory(self, path):
        self.fs.mkdir(self._path(path), create_parents=False)

    def deleteDirectory(self, path):
        # recursive, no confirmation
        self.fs.rm(self._path(path), recursive=True)

    def deleteFile(self, path):
        self.fs.rm_file(self._path(path))

    def rename(self, fromPath, toPath):
        # destination is probed and used as given, only the source is normalized
        if self.fs.exists(toPath):
            raise AlreadyExistsError(toPath)
        _withFallback(lambda p: self.fs.mv(p, toPath, recursive=True), candidatePaths(fromPath, self.fs.sep))

    def openForRead(self, path, offset):
        """
        Returns (size, handle). size is the total file size, not the number of
        bytes left after offset. The handle is positioned at offset and now
        belongs to the caller, who must close it.
        """
        path = self._path(path)
        f = self.fs.open(path, "rb")
        try:
            size = f.seek(0, io.SEEK_END)
            f.seek(offset, io.SEEK_SET)
        except Exception:
            f.close()
            raise
        return (size, ReadHandle(f, path, size))

    def putFile(self, destPath, data, appendData):
        """
        Streams the readable object data into destPath and returns the number
        of bytes written by this call. Overwrites an existing file unless
        appendData is set. Appending to a missing file creates it.
        data is only read, closing it is up to the caller.
        """
        path = self._path(destPath)

        try:
            info = self.fs.info(path)
        except FileNotFoundError:
            isExist = False
        except Exception as e:
            raise BackendError(destPath, "put file error: %s" % (e)) from e
        else:
            isExist = True
            if info["type"] == "directory":
                raise NameCollisionError(destPath)

        if appendData and not isExist:
            appendData = False

        if not appendData:
            if isExist:
                self.fs.rm_file(path)
            with self.fs.open(path, "wb") as f:
                return self._copy(data, f)

        with self.fs.open(path, "ab") as f:
            # write-only buffered files are already at the end and refuse to seek
            if f.seekable():
                f.seek(0, io.SEEK_END)
            return self._copy(data, f)

    def _path(self, path):
        return toBackendPath(path, self.fs.sep)

    def _copy(self, src, dst):
        total = 0
        while True:
            buf = src.read(self.blockSize)
            if not buf:
                return total
            dst.write(buf)
            total += len(buf)


class ReadHandle:

    """
    Download stream returned by Driver.openForRead().

    The driver does not keep a reference to it: the caller owns the handle
    and must close() it once the transfer is done, failed or was aborted.
    Usable as a context manager.
    """

    def __init__(self, stream, name, size):
        self.name = name
        self.size = size
        self._stream = stream
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def read(self, n=-1):
        return self._stream.read(n)

    def seek(self, offset, whence=io.SEEK_SET):
        return self._stream.seek(offset, whence)

    def tell(self):
        return self._stream.tell()

    def close(self):
        if not self._closed:
            self._closed = True
            self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, type, value, traceback):
        self.close()


def toBackendPath(path, sep="/"):
    """Rewrites host path separators into the backend's separator."""
    for hostSep in [os.sep, os.altsep]:
        if hostSep is not None and hostSep != sep:
            path = path.replace(hostSep, sep)
    return path


def candidatePaths(path, sep="/"):
    """
    Lookup forms of path, in the order they are tried: the normalized path,
    then the same path without its leading separator. Some backends index
    entries relative to their root while FTP paths are always absolute.
    """
    path = toBackendPath(path, sep)
    if path.startswith(sep):
        return (path, path[len(sep):])
    return (path,)


def _withFallback(func, paths):
    # at most one retry; the retry's error is raised, the first one chained
    try:
        return func(paths[0])
    except Exception as e:
        if len(paths) == 1:
            raise
        firstErr = e
    try:
        return func(paths[1])
    except Exception as e:
        raise e from firstErr
