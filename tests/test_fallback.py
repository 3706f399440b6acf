"""
Tests for path normalization and the single leading-separator retry,
checked against a mocked backend.
"""

import io

import pytest

from vfsdriver.driver import Driver, candidatePaths, toBackendPath
from vfsdriver.errors import AlreadyExistsError, BackendError
from vfsdriver.fileinfo import FileInfo, SimplePerm


@pytest.fixture
def mockDriver(mockfs):
    return Driver(mockfs, "/", SimplePerm("owner", "group"))


class TestPathHelpers:
    """Tests for toBackendPath and candidatePaths."""

    def test_posix_path_unchanged(self):
        """Paths already in backend form are kept as is."""
        assert toBackendPath("/a/b.txt") == "/a/b.txt"

    def test_host_separator_rewritten(self, mocker):
        """The host separator is replaced by the backend separator."""
        mocker.patch("vfsdriver.driver.os.sep", "\\")
        mocker.patch("vfsdriver.driver.os.altsep", "/")
        assert toBackendPath("\\a\\b.txt") == "/a/b.txt"

    def test_candidates_absolute(self):
        """Absolute paths get a relative retry form."""
        assert candidatePaths("/a/b") == ("/a/b", "a/b")

    def test_candidates_strip_single_separator(self):
        """Only one leading separator is stripped."""
        assert candidatePaths("//a") == ("//a", "/a")

    def test_candidates_relative(self):
        """Relative paths have no retry form."""
        assert candidatePaths("a/b") == ("a/b",)


class TestStatFallback:
    """Tests for the retry done by Driver.stat."""

    def test_first_lookup_succeeds(self, mockfs, mockDriver):
        """No retry when the absolute path is found."""
        mockfs.info.return_value = {"name": "/a", "size": 3, "type": "file"}
        assert mockDriver.stat("/a") == FileInfo("a", 3, False)
        mockfs.info.assert_called_once_with("/a")

    def test_retry_without_leading_separator(self, mockfs, mockDriver, mocker):
        """A failed lookup is retried once without the leading separator."""
        mockfs.info.side_effect = [
            FileNotFoundError("/a"),
            {"name": "a", "size": 3, "type": "file"},
        ]
        assert mockDriver.stat("/a") == FileInfo("a", 3, False)
        assert mockfs.info.call_args_list == [mocker.call("/a"), mocker.call("a")]

    def test_retry_error_is_raised(self, mockfs, mockDriver):
        """When both lookups fail the retry's error surfaces, chained to the first."""
        first = FileNotFoundError("/a")
        second = PermissionError("a")
        mockfs.info.side_effect = [first, second]

        with pytest.raises(PermissionError) as excinfo:
            mockDriver.stat("/a")

        assert excinfo.value is second
        assert excinfo.value.__cause__ is first
        assert mockfs.info.call_count == 2

    def test_relative_path_not_retried(self, mockfs, mockDriver):
        """A path without leading separator is looked up once."""
        mockfs.info.side_effect = FileNotFoundError("a")
        with pytest.raises(FileNotFoundError):
            mockDriver.stat("a")
        mockfs.info.assert_called_once_with("a")


class TestRenameFallback:
    """Tests for the source retry done by Driver.rename."""

    def test_destination_checked_first(self, mockfs, mockDriver):
        """An existing destination fails before any move."""
        mockfs.exists.return_value = True
        with pytest.raises(AlreadyExistsError):
            mockDriver.rename("/x", "/y")
        mockfs.exists.assert_called_once_with("/y")
        mockfs.mv.assert_not_called()

    def test_source_retried(self, mockfs, mockDriver, mocker):
        """The source is retried without separator, the destination is kept as given."""
        mockfs.exists.return_value = False
        mockfs.mv.side_effect = [FileNotFoundError("/x"), None]

        mockDriver.rename("/x", "/y")

        assert mockfs.mv.call_args_list == [
            mocker.call("/x", "/y", recursive=True),
            mocker.call("x", "/y", recursive=True),
        ]

    def test_retry_error_is_raised(self, mockfs, mockDriver):
        """The error of the second attempt is the one raised."""
        mockfs.exists.return_value = False
        second = FileNotFoundError("x")
        mockfs.mv.side_effect = [OSError("first"), second]
        with pytest.raises(FileNotFoundError) as excinfo:
            mockDriver.rename("/x", "/y")
        assert excinfo.value is second


class TestBackendErrors:
    """Tests for errors coming from the backend."""

    def test_put_file_probe_error_wrapped(self, mockfs, mockDriver):
        """Probe errors other than not-found are wrapped, nothing is opened."""
        cause = PermissionError("denied")
        mockfs.info.side_effect = cause

        with pytest.raises(BackendError) as excinfo:
            mockDriver.putFile("/f", io.BytesIO(b"x"), False)

        assert "put file error" in str(excinfo.value)
        assert excinfo.value.__cause__ is cause
        mockfs.open.assert_not_called()

    def test_read_seek_failure_closes_handle(self, mockfs, mockDriver, mocker):
        """A failing seek closes the opened file and raises."""
        f = mocker.MagicMock()
        f.seek.side_effect = [10, OSError("bad seek")]
        mockfs.open.return_value = f

        with pytest.raises(OSError, match="bad seek"):
            mockDriver.openForRead("/f", 3)
        f.close.assert_called_once_with()

    def test_append_on_unseekable_file(self, mockfs, mockDriver, mocker):
        """Write-only backend files are not asked to seek."""
        mockfs.info.return_value = {"name": "/f", "size": 1, "type": "file"}
        f = mocker.MagicMock()
        f.seekable.return_value = False
        f.__enter__.return_value = f
        mockfs.open.return_value = f

        n = mockDriver.putFile("/f", io.BytesIO(b"abc"), True)

        assert n == 3
        mockfs.open.assert_called_once_with("/f", "ab")
        f.seek.assert_not_called()
        f.write.assert_called_once_with(b"abc")
        f.__exit__.assert_called_once()

    def test_overwrite_removes_then_creates(self, mockfs, mockDriver, mocker):
        """Overwrite removes the old file before creating the new one."""
        mockfs.info.return_value = {"name": "/f", "size": 1, "type": "file"}
        f = mocker.MagicMock()
        f.__enter__.return_value = f
        mockfs.open.return_value = f

        mockDriver.putFile("/f", io.BytesIO(b"abc"), False)

        assert mockfs.method_calls[:3] == [
            mocker.call.info("/f"),
            mocker.call.rm_file("/f"),
            mocker.call.open("/f", "wb"),
        ]
