#!/usr/bin/python3
# -*- coding: utf-8; tab-width: 4; indent-tabs-mode: t -*-

# fileinfo.py - value records handed to the protocol layer
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

import posixpath
import collections


class FileInfo(collections.namedtuple("FileInfo", ["name", "size", "isDir"])):

    """
    Snapshot of one filesystem entry, built fresh on every stat / list call.
    "size" is only meaningful for files.
    """

    __slots__ = ()

    @classmethod
    def fromInfo(cls, info):
        # info is the dict returned by fsspec's info() / ls(detail=True)
        name = info["name"].rstrip("/")
        if name == "":
            name = "/"
        else:
            name = posixpath.basename(name)
        size = info.get("size")
        if size is None:
            size = 0
        return cls(name, int(size), info["type"] == "directory")


class SimplePerm(collections.namedtuple("SimplePerm", ["owner", "group"])):

    """
    Permission policy of a session. The driver passes it through untouched,
    only the protocol layer looks inside.
    """

    __slots__ = ()
