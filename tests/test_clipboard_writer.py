import pyperclip
import pytest

from controllers.clipboard_writer import ClipboardError, ClipboardWriter


class FakeHolder:
    """Records every call the fallback path makes."""

    def __init__(self, copy_result=True, copy_error=None):
        self.copy_result = copy_result
        self.copy_error = copy_error
        self.calls = []
        self.text = None

    def populate(self, text):
        self.calls.append("populate")
        self.text = text

    def select_all(self):
        self.calls.append("select_all")

    def copy(self):
        self.calls.append("copy")
        if self.copy_error is not None:
            raise self.copy_error
        return self.copy_result

    def dispose(self):
        self.calls.append("dispose")


def _failing_primary(text):
    raise pyperclip.PyperclipException("no clipboard mechanism")


def _unexpected_holder():
    pytest.fail("fallback must not be used when the primary copy works")


def test_primary_success_skips_fallback():
    copied = []
    writer = ClipboardWriter(primary=copied.append, holder_factory=_unexpected_holder)

    assert writer.copy("val b = ...") is True
    assert copied == ["val b = ..."]


def test_primary_failure_uses_fallback():
    holder = FakeHolder(copy_result=True)
    writer = ClipboardWriter(primary=_failing_primary, holder_factory=lambda: holder)

    assert writer.copy("script") is True
    assert holder.text == "script"
    assert holder.calls == ["populate", "select_all", "copy", "dispose"]


def test_fallback_reporting_failure():
    holder = FakeHolder(copy_result=False)
    writer = ClipboardWriter(primary=_failing_primary, holder_factory=lambda: holder)

    assert writer.copy("script") is False
    assert holder.calls[-1] == "dispose"


def test_fallback_error_still_disposes_holder():
    holder = FakeHolder(copy_error=ClipboardError("copy command unsupported"))
    writer = ClipboardWriter(primary=_failing_primary, holder_factory=lambda: holder)

    assert writer.copy("script") is False
    assert holder.calls == ["populate", "select_all", "copy", "dispose"]


def test_holder_unavailable_returns_false():
    def no_holder():
        raise ClipboardError("No running QApplication")

    writer = ClipboardWriter(primary=_failing_primary, holder_factory=no_holder)

    assert writer.copy("script") is False


def test_clipboard_error_from_primary_falls_back():
    def primary(text):
        raise ClipboardError("primary unavailable")

    holder = FakeHolder()
    writer = ClipboardWriter(primary=primary, holder_factory=lambda: holder)

    assert writer.copy("script") is True
    assert "copy" in holder.calls


def test_os_error_from_primary_falls_back():
    def primary(text):
        raise FileNotFoundError("xclip vanished")

    holder = FakeHolder()
    writer = ClipboardWriter(primary=primary, holder_factory=lambda: holder)

    assert writer.copy("script") is True
    assert holder.calls == ["populate", "select_all", "copy", "dispose"]


def test_runtime_error_from_holder_returns_false_and_disposes():
    holder = FakeHolder(copy_error=RuntimeError("wrapped C/C++ object has been deleted"))
    writer = ClipboardWriter(primary=_failing_primary, holder_factory=lambda: holder)

    assert writer.copy("script") is False
    assert holder.calls[-1] == "dispose"


def test_holder_factory_os_error_returns_false():
    def no_holder():
        raise OSError("display unavailable")

    writer = ClipboardWriter(primary=_failing_primary, holder_factory=no_holder)

    assert writer.copy("script") is False
