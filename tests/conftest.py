# tests/conftest.py
import pytest

from celine.htmlhead.contracts.sink import Doctype, Element


class RecordingSink:
    """In-memory sink that records every write in order."""

    def __init__(self, doctype: Doctype = Doctype.HTML5, charset: str = "UTF-8"):
        self.doctype = doctype
        self.charset = charset
        self.writes: list[Element | str] = []

    def write(self, element: Element) -> None:
        self.writes.append(element)

    def write_text(self, text: str) -> None:
        self.writes.append(text)

    @property
    def elements(self) -> list[Element]:
        return [w for w in self.writes if isinstance(w, Element)]


class FailingSink(RecordingSink):
    """Sink whose transport goes away after ``fail_after`` writes."""

    def __init__(self, fail_after: int, **kwargs):
        super().__init__(**kwargs)
        self.fail_after = fail_after

    def write(self, element: Element) -> None:
        if len(self.writes) >= self.fail_after:
            raise BrokenPipeError("transport closed")
        super().write(element)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def legacy_sink() -> RecordingSink:
    return RecordingSink(doctype=Doctype.TRANSITIONAL)
