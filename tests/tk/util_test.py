import pytest
import unittest.mock as mock

import region_tree.tk.util as util

def test_is_descendant():
    assert util.is_descendant(".!frame.!label", ".!frame")
    assert util.is_descendant(".!frame", ".!frame")
    assert not util.is_descendant(".!frame2.!label", ".!frame")
    assert not util.is_descendant(".!frame2", ".!frame")
    assert util.is_descendant(".!frame", ".")
    assert not util.is_descendant(None, ".!frame")

def test_widget_under_pointer():
    widget = mock.Mock()
    event = mock.Mock()
    event.x_root, event.y_root = 10, 20
    assert util.widget_under_pointer(widget, event) is widget.winfo_containing.return_value
    assert widget.winfo_containing.call_args == mock.call(10, 20)

    widget.winfo_containing.side_effect = KeyError()
    assert util.widget_under_pointer(widget, event) is None

def test_centre_window():
    window = mock.Mock()
    window.winfo_screenwidth.return_value = 1000
    window.winfo_screenheight.return_value = 800
    util.centre_window(window, 200, 100)
    assert window.geometry.call_args == mock.call("200x100+400+350")
    assert not window.update_idletasks.called

def test_centre_window_requested_size():
    window = mock.Mock()
    window.winfo_screenwidth.return_value = 1000
    window.winfo_screenheight.return_value = 800
    window.winfo_reqwidth.return_value = 300
    window.winfo_reqheight.return_value = 200
    util.centre_window(window, width=400)
    assert window.geometry.call_args == mock.call("400x200+300+300")
