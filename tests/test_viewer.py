import time

import pytest

from xnetframe.viewer import Viewer, ViewerError, format_date


class ListViewer(Viewer):
    def __init__(self, name=""):
        super().__init__(name)
        self.lines = []

    def view(self, timestamp, line):
        if line is None:
            raise ViewerError("no line")
        self.lines.append(f"{format_date(timestamp)} : {line}")


def test_format_date_local_time():
    stamp = time.mktime((2012, 3, 6, 10, 20, 30, 0, 0, -1))
    assert format_date(stamp) == "2012/03/06 10:20:30"


def test_format_date_round_trips_through_strptime():
    stamp = int(time.time())
    parsed = time.strptime(format_date(stamp), "%Y/%m/%d %H:%M:%S")
    assert int(time.mktime(parsed)) == stamp


def test_format_date_abnormal_time():
    text = format_date(10**20)
    assert text.startswith("Abnormal Time ")
    number = int(text[len("Abnormal Time "):])
    assert -(2**31) <= number < 2**31


def test_viewer_subclass_collects_lines():
    viewer = ListViewer("console")
    stamp = time.mktime((2012, 3, 6, 1, 2, 3, 0, 0, -1))
    viewer.view(stamp, "hello")
    assert format_date(stamp) == "2012/03/06 01:02:03"
    assert viewer.name == "console"
    assert viewer.lines == ["2012/03/06 01:02:03 : hello"]


def test_viewer_init_sets_name():
    viewer = ListViewer("first")
    Viewer.__init__(viewer, "renamed")
    assert viewer.name == "renamed"
    Viewer.__init__(viewer, "")
    assert viewer.name == ""


def test_viewer_error_carries_message():
    error = ViewerError("no line")
    assert str(error) == "no line"
    with pytest.raises(ViewerError):
        raise error


def test_viewer_is_abstract():
    with pytest.raises(TypeError):
        Viewer("x")